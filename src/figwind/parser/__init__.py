from figwind.parser.declarations import parse_declarations, resolve_value

__all__ = ["parse_declarations", "resolve_value"]
