"""
Feature modules of the Realms mechanic engine.

- shared: constants, formulas, balance accessors and domain exceptions
- catalog: reference resolution and catalog providers
- mechanics: UI selection → part/property reference builders
- power, technique, item: cost calculators and display derivers

Import from the submodules (or the top-level ``realms_mechanics`` package);
this package itself re-exports nothing so the domain models can depend on
``modules.shared`` without import cycles.
"""
