"""A part holding hand-written Go code."""

import re
from typing import ClassVar

from pydantic import PrivateAttr

from .base import FormData, Part, form_value, normalize_newlines
from .expressions import check_brackets, strip_literals

_IDENT = r"[A-Za-z_]\w*"
_SEND_RE = re.compile(rf"({_IDENT})\s*<-(?!\s*chan\b)")
_RECV_RE = re.compile(rf"<-\s*({_IDENT})")
_RANGE_RE = re.compile(rf"\brange\s+({_IDENT})")
_CLOSE_RE = re.compile(rf"\bclose\(\s*({_IDENT})\s*\)")

_KEYWORDS = {"case", "chan", "func", "go", "return", "select", "struct", "var"}


def _names(pattern: re.Pattern, text: str) -> set[str]:
    return {name for name in pattern.findall(text) if name not in _KEYWORDS}


class Code(Part):
    """Go code run verbatim as the body of the goroutine.

    Channel usage is derived by scanning the code for sends, receives,
    ``range`` loops and ``close`` calls.
    """

    type_key: ClassVar[str] = "Code"
    editor_template: ClassVar[str] = (
        '<div class="formfield"><label for="Code">Code</label>\n'
        '<textarea name="Code" rows="25" cols="80">$code</textarea></div>'
    )

    code: str = ""

    _reads: list[str] = PrivateAttr(default_factory=list)
    _writes: list[str] = PrivateAttr(default_factory=list)

    def model_post_init(self, context: object) -> None:
        self._scan()

    def _scan(self) -> None:
        text = strip_literals(self.code)
        self._writes = sorted(_names(_SEND_RE, text) | _names(_CLOSE_RE, text))
        # The right-hand side of a send is not a receive.
        received = _RECV_RE.findall(_SEND_RE.sub(" ", text))
        self._reads = sorted(
            {name for name in received if name not in _KEYWORDS}
            | _names(_RANGE_RE, text)
        )

    def impl(self) -> str:
        return self.code

    def channels(self) -> tuple[list[str], list[str]]:
        return list(self._reads), list(self._writes)

    def update(self, form: FormData | None = None) -> None:
        if form is not None and "Code" in form:
            code = normalize_newlines(form_value(form, "Code"))
            check_brackets(code, "Code")
            self.code = code
        self._scan()
