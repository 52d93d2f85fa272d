"""Exception hierarchy shared by the parser, extractor, registry and build pipeline"""


class MdxliveError(Exception):
    """Base class for all mdxlive errors."""


class FrontmatterError(MdxliveError, ValueError):
    """Header block could not be read; fatal to the single document."""


class UnclosedFrontmatterError(FrontmatterError):
    def __init__(self) -> None:
        super().__init__("Unclosed frontmatter block - missing closing ---")


class MalformedFrontmatterError(FrontmatterError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Malformed frontmatter: {message}")
        self.message = message


class MissingVariantsError(MdxliveError, ValueError):
    """Component source defines no usable variantClasses table."""

    def __init__(self) -> None:
        super().__init__("Missing variant classes: component must define a variantClasses object")


class ComponentNotFoundError(MdxliveError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Component not found: {name}")
        self.name = name


class RegistryError(MdxliveError):
    """Components directory is missing or unreadable."""


class OutputPathError(MdxliveError, ValueError):
    """Page output path escapes the output directory or collides with another page."""


class PageBuildError(MdxliveError):
    """A single page failed; sibling pages are unaffected."""

    def __init__(self, source_path, cause: Exception) -> None:
        super().__init__(f"{source_path}: {cause}")
        self.source_path = source_path
        self.cause = cause


class BuildError(MdxliveError):
    """Whole-build failure (e.g. docs directory missing)."""
