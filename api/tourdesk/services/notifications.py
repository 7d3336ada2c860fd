"""
Confirmation & Notification - Collaborators for destructive actions and toasts
"""
from collections import deque
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, List, Optional, Protocol, Union
import logging

from tourdesk.config import settings
from tourdesk.schemas.common import Notification, NotificationKind

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure? You won't be able to revert this!"

# Notifications raised inside the current request's scope
_request_scope: ContextVar[Optional[List[Notification]]] = ContextVar("notification_scope", default=None)


class Confirmer(Protocol):
    """Gate for destructive actions"""
    def confirm(self, prompt: str) -> bool: ...


class Notifier(Protocol):
    """Transient feedback surface"""
    def notify(self, kind: Union[NotificationKind, str], message: str) -> None: ...


class StaticConfirmer:
    """Answers every prompt with a fixed decision (e.g. a `confirm` flag on a request)"""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        logger.debug(f"Confirmation '{prompt}' -> {self.answer}")
        return self.answer


class AlwaysConfirm(StaticConfirmer):
    def __init__(self):
        super().__init__(True)


class NotificationCenter:
    """
    Shared feed of recent notifications plus per-request scopes.

    Every notification is logged and kept in the bounded feed read by
    `/notifications`. A mutating endpoint opens `scope()` around its store
    call and returns only what that call raised; scopes live in a context
    variable, so concurrent requests never see each other's toasts.
    """

    def __init__(self, maxlen: int = settings.NOTIFICATION_BUFFER_SIZE):
        self._pending: deque = deque(maxlen=maxlen)

    def notify(self, kind: Union[NotificationKind, str], message: str) -> None:
        kind = NotificationKind(kind)
        notification = Notification(kind=kind, message=message)
        self._pending.append(notification)
        raised = _request_scope.get()
        if raised is not None:
            raised.append(notification)

        if kind == NotificationKind.ERROR:
            logger.warning(f"[{kind.value}] {message}")
        else:
            logger.info(f"[{kind.value}] {message}")

    @contextmanager
    def scope(self) -> Iterator[List[Notification]]:
        """Collect the notifications raised until the block exits"""
        raised: List[Notification] = []
        token = _request_scope.set(raised)
        try:
            yield raised
        finally:
            _request_scope.reset(token)

    def peek(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        notifications = list(self._pending)
        self._pending.clear()
        return notifications

    def __len__(self) -> int:
        return len(self._pending)
