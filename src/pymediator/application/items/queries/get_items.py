from dataclasses import dataclass
from typing import ClassVar, List

from pymediator.core import Query, RequestHandler
from pymediator.domain.shared.item import Item
from pymediator.ports.repositories import IItemRepository


@dataclass(frozen=True)
class GetItemsQuery(Query[List[Item]]):
    """Query items whose name contains a keyword"""
    discriminant: ClassVar[str] = "GetItems"

    keyword: str = ""


class GetItemsHandler(RequestHandler[GetItemsQuery, List[Item]]):
    """Handler for item search"""

    def __init__(self, item_repository: IItemRepository):
        self._item_repo = item_repository

    async def handle(self, request: GetItemsQuery) -> List[Item]:
        return self._item_repo.search(request.keyword)
