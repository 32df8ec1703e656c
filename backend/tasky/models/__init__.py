from .todo import Todo, parse_object_id

__all__ = ["Todo", "parse_object_id"]
