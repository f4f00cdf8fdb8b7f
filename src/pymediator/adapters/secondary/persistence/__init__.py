from .memory import InMemoryItemRepository, InMemoryOrderRepository

__all__ = ['InMemoryItemRepository', 'InMemoryOrderRepository']
