"""Resource loading boundary.

Documents delegate URL resolution and form submission to a ``ResourceLoader``.
The default loader resolves URLs but performs no navigation; applications that
submit forms pass their own subclass to ``Document``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urljoin

from .errors import not_implemented

if TYPE_CHECKING:
    from .document import Document
    from .form import HTMLFormElement


class ResourceLoader:
    def resolve_url(self, document: Document, url: str) -> str:
        """Resolve ``url`` against the document's base URL.

        Input that cannot be resolved is returned unchanged.
        """
        try:
            return urljoin(document.base_url, url)
        except ValueError:
            document.debug(f"could not resolve {url!r} against {document.base_url!r}")
            return url

    def submit_form(self, form: HTMLFormElement) -> None:
        not_implemented("HTMLFormElement.prototype.submit", form.owner_document)


class RecordingLoader(ResourceLoader):
    """Loader that records submitted forms instead of navigating."""

    def __init__(self) -> None:
        self.submissions: list[HTMLFormElement] = []

    def submit_form(self, form: HTMLFormElement) -> None:
        form.debug(f"recorded submission {form.method.upper()} {form.action}")
        self.submissions.append(form)
