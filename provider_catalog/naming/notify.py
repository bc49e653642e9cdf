"""Out-of-band failure notifications.

Generation failures never stop a run, but a human should learn that the
display-name credential stopped working. In CI the tool prints a GitHub
Actions workflow command::

    ::warning title=APIpie API Key Issue::@<user> <message>

which the runner renders as an annotation mentioning ``<user>``.
Notifiers are best-effort and never raise.
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional, Protocol, Set, TextIO

from ..base.logging import get_logger, log_event

ANNOTATION_TITLE = "APIpie API Key Issue"

_logger = get_logger("catalog.notify")


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class GitHubActionsNotifier:
    """Emit ``::warning`` annotations mentioning ``user``.

    With no user configured the notifier only logs at debug level. A message
    identical to one already sent is not repeated. Line breaks in a message are
    collapsed to spaces so the annotation stays on one line.
    """

    def __init__(self, user: Optional[str], stream: Optional[TextIO] = None) -> None:
        self._user = user
        self._stream = stream
        self._sent: Set[str] = set()

    def notify(self, message: str) -> None:
        # Workflow commands end at the first newline.
        message = " ".join(message.splitlines())
        if not self._user:
            log_event(_logger, "notify.skipped", level=logging.DEBUG, message=message)
            return
        if message in self._sent:
            return
        self._sent.add(message)
        stream = self._stream or sys.stdout
        try:
            stream.write(f"::warning title={ANNOTATION_TITLE}::@{self._user} {message}\n")
            stream.flush()
        except (OSError, ValueError) as e:
            log_event(_logger, "notify.failed", level=logging.WARNING, error=str(e))
            return
        log_event(_logger, "notify.sent", level=logging.WARNING, user=self._user, message=message)


class RecordingNotifier:
    """Keeps messages in memory for callers that report failures themselves."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


__all__ = ["Notifier", "GitHubActionsNotifier", "RecordingNotifier", "ANNOTATION_TITLE"]
