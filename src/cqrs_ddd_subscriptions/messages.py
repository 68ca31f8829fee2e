"""Mail message types: structured messages, view data and deliverables."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .ports.mailer import IMailer

UNSUBSCRIBE_LINK_FOR_LIST = "unsubscribe_link_for_list"
UNSUBSCRIBE_LINK_FOR_ALL = "unsubscribe_link_for_all"

_RESERVED_KEYS = frozenset({UNSUBSCRIBE_LINK_FOR_LIST, UNSUBSCRIBE_LINK_FOR_ALL})


class Rendered(str):
    """Template output that mailers must use verbatim, never as a view name."""

    __slots__ = ()


# Either a single (html) view name, or a mapping of "html"/"text" to view
# names or Rendered content.
ViewSpec = str | Mapping[str, str]

MessageCallback = Callable[[EmailMessage], None]


@dataclass(frozen=True)
class AttachmentVO:
    """Immutable attachment value object."""

    filename: str
    content: bytes
    mimetype: str


@dataclass
class ViewData:
    """
    Rendering context attached to a MailMessage.

    The unsubscribe links are typed fields so that caller-supplied keys in
    ``extra`` can never shadow them.
    """

    unsubscribe_link_for_list: str | None = None
    unsubscribe_link_for_all: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._reject_reserved(self.extra)

    def update(self, values: Mapping[str, Any]) -> None:
        """Merge caller-supplied keys into ``extra``."""
        self._reject_reserved(values)
        self.extra.update(values)

    def as_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        if self.unsubscribe_link_for_list is not None:
            data[UNSUBSCRIBE_LINK_FOR_LIST] = self.unsubscribe_link_for_list
        if self.unsubscribe_link_for_all is not None:
            data[UNSUBSCRIBE_LINK_FOR_ALL] = self.unsubscribe_link_for_all
        return data

    @staticmethod
    def _reject_reserved(values: Mapping[str, Any]) -> None:
        clash = _RESERVED_KEYS.intersection(values)
        if clash:
            raise ValueError(f"View data keys {sorted(clash)} are reserved for unsubscribe links")


@dataclass
class MailMessage:
    """
    Structured mail message produced by ``Notification.to_mail()``.

    Content comes either from ``view`` or, when unset, from the channel's
    html/text templates rendered with ``data()``.
    """

    subject: str | None = None
    greeting: str | None = None
    salutation: str | None = None
    level: str = "info"
    intro_lines: list[str] = field(default_factory=list)
    outro_lines: list[str] = field(default_factory=list)
    action_text: str | None = None
    action_url: str | None = None

    view: ViewSpec | None = None
    view_data: ViewData = field(default_factory=ViewData)

    from_address: str | None = None
    from_name: str | None = None
    reply_to: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    priority: int | None = None
    attachments: list[AttachmentVO] = field(default_factory=list)
    callbacks: list[MessageCallback] = field(default_factory=list)

    def line(self, text: str) -> MailMessage:
        """Add a line before the action button, or after it once one is set."""
        if self.action_text is None:
            self.intro_lines.append(text)
        else:
            self.outro_lines.append(text)
        return self

    def action(self, text: str, url: str) -> MailMessage:
        self.action_text = text
        self.action_url = url
        return self

    def error(self) -> MailMessage:
        self.level = "error"
        return self

    def attach(self, attachment: AttachmentVO) -> MailMessage:
        self.attachments.append(attachment)
        return self

    def with_email_message(self, callback: MessageCallback) -> MailMessage:
        """Register a callback run against the transport-level EmailMessage."""
        self.callbacks.append(callback)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "subject": self.subject,
            "greeting": self.greeting,
            "salutation": self.salutation,
            "intro_lines": list(self.intro_lines),
            "outro_lines": list(self.outro_lines),
            "action_text": self.action_text,
            "action_url": self.action_url,
        }

    def data(self) -> dict[str, Any]:
        """Render context: message fields overlaid with view data."""
        return {**self.to_dict(), **self.view_data.as_dict()}


@runtime_checkable
class Mailable(Protocol):
    """Self-contained deliverable that builds and sends its own mail."""

    async def send(self, mailer: IMailer) -> None: ...
