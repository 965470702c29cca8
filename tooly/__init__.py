"""
Tooly - simple text tools for everyday coding.

Packages:
    - tooly.codecs: Base64 / URL / JWT / Hex / Unicode-escape codecs
    - tooly.json_tools: JSON beautify/repair, key sorting, path-addressed tree
    - tooly.converter: Smart Converter state orchestration
    - tooly.tools: List Wizard, Diff Master and Time Converter helpers
    - tooly.tui: Textual terminal UI
"""

__version__ = "0.1.0"
