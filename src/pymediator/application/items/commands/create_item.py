from dataclasses import dataclass
from typing import ClassVar, Optional

from pymediator.core import Command, RequestHandler, ValidationError
from pymediator.domain.shared.exceptions import DuplicateItemError
from pymediator.domain.shared.item import Item
from pymediator.ports.repositories import IItemRepository


@dataclass(frozen=True)
class CreateItemResult:
    """Outcome of item creation"""
    created: bool
    name: str
    item_id: Optional[int] = None


@dataclass(frozen=True)
class CreateItemCommand(Command[CreateItemResult]):
    """Command to create a catalogue item"""
    discriminant: ClassVar[str] = "CreateItem"

    name: str

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Item name cannot be empty")


class CreateItemHandler(RequestHandler[CreateItemCommand, CreateItemResult]):
    """Handler for item creation"""

    def __init__(self, item_repository: IItemRepository):
        self._item_repo = item_repository

    async def handle(self, request: CreateItemCommand) -> CreateItemResult:
        """
        Create the item unless its name is taken

        Raises:
            DuplicateItemError: If an item with the same name exists
        """
        if self._item_repo.exists_by_name(request.name):
            raise DuplicateItemError(f"Item '{request.name.strip()}' already exists")

        item = self._item_repo.create(Item(name=request.name))
        return CreateItemResult(created=True, name=item.name, item_id=item.item_id)
