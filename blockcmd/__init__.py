"""
blockcmd - A parser for the fly/placing command language.

This package turns one line of user text into a Command value or a
structured CommandSyntaxError.

Usage:
    from blockcmd import parse, CommandSyntaxError

    parse("fly true")          # Fly(enabled=True)
    parse("placing glass")     # BlockPlacing(block=GLASS)
"""

# Lazy imports so that importing the parser does not pull in pandas
def __getattr__(name: str):
    if name in ("CommandParser", "CommandSyntaxError", "parse"):
        from blockcmd.parser import command_parser
        return getattr(command_parser, name)
    if name in ("BlockKind", "BlockPlacing", "Command", "Fly"):
        from blockcmd.syntax_tree import nodes
        return getattr(nodes, name)
    if name in ("CommandExecutor", "CommandHandler", "PlayerState", "dispatch"):
        from blockcmd import executors
        return getattr(executors, name)
    if name in ("parse_report", "summarize"):
        from blockcmd import report
        return getattr(report, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "BlockKind",
    "BlockPlacing",
    "Command",
    "CommandExecutor",
    "CommandHandler",
    "CommandParser",
    "CommandSyntaxError",
    "Fly",
    "PlayerState",
    "dispatch",
    "parse",
    "parse_report",
    "summarize",
]

__version__ = "0.1.0"
