from .add_line_item import AddLineItemCommand, AddLineItemHandler
from .create_order import CreateOrderCommand, CreateOrderHandler
from .delete_order import DeleteOrderCommand, DeleteOrderHandler
from .remove_line_item import RemoveLineItemCommand, RemoveLineItemHandler

__all__ = [
    'AddLineItemCommand', 'AddLineItemHandler',
    'CreateOrderCommand', 'CreateOrderHandler',
    'DeleteOrderCommand', 'DeleteOrderHandler',
    'RemoveLineItemCommand', 'RemoveLineItemHandler',
]
