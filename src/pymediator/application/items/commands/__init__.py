from .create_item import CreateItemCommand, CreateItemHandler, CreateItemResult

__all__ = ['CreateItemCommand', 'CreateItemHandler', 'CreateItemResult']
