from .data_loader import DataLoader

__all__ = ["DataLoader"]
