"""Core types and logic for treecalc: IR, errors, configuration, and the expression language."""
