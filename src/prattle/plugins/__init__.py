"""Grammar plugin subsystem for prattle.

Grammar variants register by name in the module-level ``grammars``
registry.  Third-party grammars are discovered through
``importlib.metadata`` entry-points in the "prattle.grammars" group.

Example
-------
Declare a grammar in a plugin package's pyproject.toml:

.. code-block:: toml

    [project.entry-points."prattle.grammars"]
    my_grammar = "my_package.grammars:MyGrammar"
"""
from __future__ import annotations

from prattle.plugins.registry import (
    ENTRYPOINT_GROUP,
    ArithmeticGrammar,
    DefaultGrammar,
    Grammar,
    GrammarAlreadyRegisteredError,
    GrammarNotFoundError,
    GrammarRegistry,
    grammars,
)

__all__ = [
    "Grammar",
    "GrammarRegistry",
    "GrammarNotFoundError",
    "GrammarAlreadyRegisteredError",
    "DefaultGrammar",
    "ArithmeticGrammar",
    "grammars",
    "ENTRYPOINT_GROUP",
]
