"""A part that routes values to outputs by predicate."""

import html
from typing import ClassVar

from pydantic import BaseModel, Field

from ..schema.errors import ValidationError
from ..schema.identifiers import require_identifier
from .base import FormData, Part, form_value, form_values
from .expressions import check_expression


class FilterPath(BaseModel):
    """Send a value to ``output`` when ``pred`` holds for it."""

    pred: str = ""
    output: str = ""


class Filter(Part):
    """Reads values ``v`` from one channel and sends each to matching outputs."""

    type_key: ClassVar[str] = "Filter"
    editor_template: ClassVar[str] = (
        '<div class="formfield"><label for="Input">Input</label>\n'
        '<input type="text" name="Input" required value="$input"></div>\n'
        "<table>\n<tr><th>Predicate on v</th><th>Output</th></tr>\n$paths\n</table>"
    )

    input: str = ""
    paths: list[FilterPath] = Field(default_factory=list)

    def outputs(self) -> list[str]:
        """Distinct output channels in first-use order."""
        seen: list[str] = []
        for path in self.paths:
            if path.output not in seen:
                seen.append(path.output)
        return seen

    def impl(self) -> str:
        if not self.input:
            return "// Filter has no input channel."
        lines = [f"for v := range {self.input} {{"]
        for path in self.paths:
            lines.append(f"\tif {path.pred} {{")
            lines.append(f"\t\t{path.output} <- v")
            lines.append("\t}")
        lines.append("}")
        lines.extend(f"close({output})" for output in self.outputs())
        return "\n".join(lines)

    def channels(self) -> tuple[list[str], list[str]]:
        read = [self.input] if self.input else []
        return read, self.outputs()

    def update(self, form: FormData | None = None) -> None:
        input_name = self.input
        paths = list(self.paths)

        if form is not None:
            if "Input" in form:
                input_name = form_value(form, "Input").strip()
            if "Pred" in form or "Output" in form:
                preds = form_values(form, "Pred")
                outputs = form_values(form, "Output")
                if len(preds) != len(outputs):
                    raise ValidationError("Pred", "every predicate needs an output")
                paths = [
                    FilterPath(pred=pred.strip(), output=output.strip())
                    for pred, output in zip(preds, outputs)
                    if pred.strip() or output.strip()
                ]

        if input_name:
            require_identifier(input_name, "Input")
        for path in paths:
            require_identifier(path.output, "Output")
            check_expression(path.pred, "Pred")

        self.input = input_name
        self.paths = paths

    def editor_context(self) -> dict[str, str]:
        rows = [
            '<tr><td><input type="text" name="Pred" value="{}"></td>'
            '<td><input type="text" name="Output" value="{}"></td></tr>'.format(
                html.escape(path.pred), html.escape(path.output)
            )
            for path in [*self.paths, FilterPath()]
        ]
        return {"input": html.escape(self.input), "paths": "\n".join(rows)}
