"""
Tooly terminal UI.

A Textual-based terminal UI with one tab per tool.

Usage:
    uv run python -m tooly.tui.app
    uv run python -m tooly.tui.app --tab diff

Components:
    - ToolyApp: Main application class
    - ConverterPane: Smart Converter (encode/decode, beautify, sort, tree)
    - DiffPane: Diff Master
    - ListPane: List Wizard
    - TimePane: Time Converter
    - JsonTreePanel: Collapsible JSON tree widget
"""
