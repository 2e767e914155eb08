"""
ConstantRegistry — реестр именованных констант

Реестр принадлежит вызывающей стороне: хранилище (dict) передаётся
в конструктор либо создаётся новым, модульного глобального состояния нет.
Каждое имя определяется один раз; повторное определение — Overwrite.
"""

from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from src.core.errors import Overwrite
from src.core.logging_config import get_logger


logger = get_logger(__name__)

V = TypeVar("V")


class ConstantRegistry(Generic[V]):
    """
    Реестр именованных констант.

    Examples:
        >>> registry = ConstantRegistry()
        >>> registry.define("two", BigNum.TWO)
        BigNum('2.0')
        >>> "two" in registry
        True
    """

    def __init__(self, storage: Optional[Dict[str, V]] = None):
        """
        Args:
            storage: Хранилище вызывающей стороны (по умолчанию новый dict)
        """
        self._storage: Dict[str, V] = {} if storage is None else storage

    def define(self, name: str, value: V) -> V:
        """
        Определение константы.

        Returns:
            Сохранённое значение

        Raises:
            Overwrite: Имя уже определено
        """
        if name in self._storage:
            raise Overwrite(name)
        self._storage[name] = value
        logger.debug("constant %s defined as %s", name, value)
        return value

    def get(self, name: str) -> V:
        """
        Значение константы.

        Raises:
            KeyError: Имя не определено
        """
        return self._storage[name]

    def names(self) -> List[str]:
        """Имена в порядке определения."""
        return list(self._storage)

    def __contains__(self, name: object) -> bool:
        return name in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)
