"""
Configuration subsystem for the Realms mechanic engine.

Static vs Balance Configuration
-------------------------------
**Static (Config):**
- Loaded from ``REALMS_*`` environment variables (.env supported) at import
- Includes: environment, logging switches, balance directory override

**Balance (ConfigManager):**
- Loaded lazily from the packaged ``balance/*.yaml`` files
- Includes: rarity brackets, currency surcharge, range steps, die sizes
- Explicit ``reload()`` for hosts that edit the tables at runtime

Usage
-----
```python
from realms_mechanics.core.config import Config, ConfigManager

if Config.is_testing():
    ...

rate = ConfigManager.get("items.currency_surcharge_rate", 0.125)
```
"""

from realms_mechanics.core.config.config import Config, Environment
from realms_mechanics.core.config.errors import (
    ConfigError,
    ConfigInitializationError,
    ConfigValidationError,
)
from realms_mechanics.core.config.manager import ConfigManager

__all__ = [
    "Config",
    "Environment",
    "ConfigManager",
    "ConfigError",
    "ConfigInitializationError",
    "ConfigValidationError",
]
