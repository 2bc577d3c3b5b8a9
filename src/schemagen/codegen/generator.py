"""
Base code generator.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from schemagen.core.types import (
    ArtifactTarget,
    FieldDescriptor,
    FieldKind,
    GeneratedCode,
    ModelDefinition,
)
from schemagen.logging import get_logger

logger = get_logger(__name__)

# Kind used for any property whose kind is not a known FieldKind
FALLBACK_KIND = FieldKind.STRING


def capitalize_model_name(model_name: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return model_name[:1].upper() + model_name[1:]


def resolve_kind(kind: FieldKind | str) -> FieldKind:
    """Map a raw kind onto a known FieldKind, falling back to String."""
    try:
        return FieldKind(kind)
    except ValueError:
        return FALLBACK_KIND


def is_known_kind(kind: FieldKind | str) -> bool:
    """Check if a raw kind is one of the known FieldKinds."""
    try:
        FieldKind(kind)
    except ValueError:
        return False
    return True


# Integers above this are not exact in a JS number
MAX_SAFE_INTEGER = 2**53 - 1


def format_number(value: int | float) -> str:
    """
    Render a bound the way a JavaScript template literal would.

    Follows Number.prototype.toString: shortest round-trip digits, plain
    notation for magnitudes in [1e-6, 1e21) and exponent notation such as
    `1e+21` or `1.5e-7` outside it.
    """
    if isinstance(value, int) and abs(value) <= MAX_SAFE_INTEGER:
        return str(value)

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    # value == 0.<digits> * 10**point
    k = len(digits)
    point = exponent + k

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


@dataclass
class GeneratedFile:
    """A generated source file."""

    path: str
    content: str
    target: ArtifactTarget


@dataclass
class GenerationResult:
    """Result of generating every artifact for one model."""

    model_name: str
    files: list[GeneratedFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def get(self, target: ArtifactTarget | str) -> GeneratedFile | None:
        """Get the generated file for a target."""
        target = ArtifactTarget(target)
        for gf in self.files:
            if gf.target == target:
                return gf
        return None

    def to_generated_code(self) -> GeneratedCode:
        """Collect the file contents into a GeneratedCode record."""
        return GeneratedCode(**{gf.target.value: gf.content for gf in self.files})

    def write_all(self, base_dir: Path | str) -> list[Path]:
        """
        Write all generated files to disk.

        Args:
            base_dir: Base directory to write files to

        Returns:
            List of paths to written files
        """
        base_path = Path(base_dir)
        written = []

        for gf in self.files:
            file_path = base_path / gf.path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(gf.content)
            written.append(file_path)

        return written


class CodeGenerator(ABC):
    """
    Abstract base class for code generators.

    A generator renders one artifact from a model name and its ordered
    properties. Rendering is a pure function of those inputs: every
    property maps to exactly one entry, in input order, and unknown kinds
    are rendered as String.
    """

    target: ArtifactTarget
    file_suffix: str

    def __init__(self, model_name: str, properties: Sequence[FieldDescriptor]) -> None:
        """
        Initialize the generator.

        Args:
            model_name: Raw model name as typed by the user
            properties: Ordered property descriptors
        """
        self.model_name = model_name
        self.properties = list(properties)

    @classmethod
    def from_definition(cls, model: ModelDefinition) -> "CodeGenerator":
        """Build a generator for a ModelDefinition."""
        return cls(model.model_name, model.properties)

    @property
    def capitalized_name(self) -> str:
        return capitalize_model_name(self.model_name)

    @abstractmethod
    def render_property(self, prop: FieldDescriptor, kind: FieldKind) -> str:
        """
        Render the entry for a single property.

        Args:
            prop: The property descriptor
            kind: The property's kind after fallback resolution
        """
        ...

    @abstractmethod
    def render_module(self, entries: str) -> str:
        """Wrap the joined property entries in the artifact's surrounding source."""
        ...

    def render(self) -> str:
        """Render the artifact source."""
        entries = "\n".join(
            self.render_property(prop, resolve_kind(prop.kind)) for prop in self.properties
        )
        source = self.render_module(entries)
        logger.debug(
            "Rendered artifact",
            model_name=self.model_name,
            target=self.target.value,
            property_count=len(self.properties),
        )
        return source

    def generate(self) -> GeneratedFile:
        """Render the artifact as a GeneratedFile."""
        return GeneratedFile(
            path=f"{self.model_name}.{self.file_suffix}",
            content=self.render(),
            target=self.target,
        )
