from figwind.mapper.utilities import to_tailwind

__all__ = ["to_tailwind"]
