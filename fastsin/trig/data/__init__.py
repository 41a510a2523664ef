from .sin_table import SIN_TABLE, TABLE_SIZE

__all__ = ["SIN_TABLE", "TABLE_SIZE"]
