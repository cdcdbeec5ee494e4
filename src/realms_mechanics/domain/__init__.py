"""Domain layer: immutable models of catalog parts, references and results."""
