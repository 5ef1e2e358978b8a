"""A part that merges several channels into one."""

import html
from typing import ClassVar

from pydantic import Field

from ..schema.identifiers import require_identifier
from .base import FormData, Part, form_value, form_values


class Multiplexer(Part):
    """Forwards every value from each input to the output.

    The output is closed once all inputs are closed.
    """

    type_key: ClassVar[str] = "Multiplexer"
    editor_template: ClassVar[str] = (
        "<div class=\"formfield\"><label>Inputs</label>\n$inputs</div>\n"
        '<div class="formfield"><label for="Output">Output</label>\n'
        '<input type="text" name="Output" value="$output"></div>'
    )

    inputs: list[str] = Field(default_factory=list)
    output: str = ""

    def impl(self) -> str:
        if not self.output:
            return "// Multiplexer has no output channel."
        lines = [
            "var multiplex sync.WaitGroup",
            f"multiplex.Add({len(self.inputs)})",
        ]
        for name in self.inputs:
            lines.extend([
                "go func() {",
                "\tdefer multiplex.Done()",
                f"\tfor v := range {name} {{",
                f"\t\t{self.output} <- v",
                "\t}",
                "}()",
            ])
        lines.append("multiplex.Wait()")
        lines.append(f"close({self.output})")
        return "\n".join(lines)

    def imports(self) -> list[str]:
        return ["sync"]

    def channels(self) -> tuple[list[str], list[str]]:
        written = [self.output] if self.output else []
        return list(self.inputs), written

    def update(self, form: FormData | None = None) -> None:
        inputs = list(self.inputs)
        output = self.output

        if form is not None:
            if "Input" in form:
                inputs = []
                for name in form_values(form, "Input"):
                    name = name.strip()
                    if name and name not in inputs:
                        inputs.append(name)
            if "Output" in form:
                output = form_value(form, "Output").strip()

        for name in inputs:
            require_identifier(name, "Input")
        if output:
            require_identifier(output, "Output")

        self.inputs = inputs
        self.output = output

    def editor_context(self) -> dict[str, str]:
        fields = [
            f'<input type="text" name="Input" value="{html.escape(name)}">'
            for name in [*self.inputs, ""]
        ]
        return {"inputs": "\n".join(fields), "output": html.escape(self.output)}
