"""Convenience re-export of repository interfaces"""
from .outbound.repositories import IItemRepository, IOrderRepository

__all__ = ['IItemRepository', 'IOrderRepository']
