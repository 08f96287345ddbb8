from pydantic import BaseModel, ConfigDict, Field

from semantic_overlay.core.positions import split_lines


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    column: int

    def key(self) -> tuple[int, int]:
        return (self.line, self.column)


class Span(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @property
    def is_valid(self) -> bool:
        if self.start.line < 0 or self.start.column < 0 or self.end.line < 0 or self.end.column < 0:
            return False
        return self.end.key() >= self.start.key()

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line


class Capture(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    span: Span

    @classmethod
    def from_tuple(cls, value: tuple[str, int, int, int, int]) -> "Capture":
        name, start_line, start_column, end_line, end_column = value
        return cls(
            name=name,
            span=Span(
                start=Position(line=start_line, column=start_column),
                end=Position(line=end_line, column=end_column),
            ),
        )


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    modifiers: frozenset[str] = frozenset()


class ResolvedToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    start_column: int
    length: int
    classification: Classification

    @property
    def end_column(self) -> int:
        return self.start_column + self.length


class LabelPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str


class HintFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    label: str | list[LabelPart]

    @property
    def parts(self) -> list[str]:
        if isinstance(self.label, str):
            return [self.label]
        return [part.value for part in self.label]

    @property
    def text(self) -> str:
        return "".join(self.parts)


class AggregatedLineHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    text: str
    margin: int


class DecorationStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str = "editorInlayHint.foreground"
    background_color: str = "transparent"
    font_style: str = "normal"


class DecorationSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int
    anchor_column: int
    text: str
    margin: int
    style: DecorationStyle = Field(default_factory=DecorationStyle)


class TextDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    text: str
    language: str

    @property
    def lines(self) -> list[str]:
        return split_lines(self.text)

    @property
    def line_lengths(self) -> list[int]:
        return [len(line) for line in self.lines]

    @property
    def full_span(self) -> Span:
        lines = self.lines
        return Span(
            start=Position(line=0, column=0),
            end=Position(line=len(lines) - 1, column=len(lines[-1])),
        )
