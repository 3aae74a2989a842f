from dataclasses import dataclass

DEFAULT_ATTRIBUTES = ("alt", "value", "href", "title")
DEFAULT_ELEMENTS = ("a", "input", "span")
DEFAULT_HEADER_SELECTORS = ("h1", "h2", "h3", "h4", "h5", "h6", ".header")
DEFAULT_TABLE_NAME_SEPARATOR = ":"

# Removed from every table before extraction
PRUNED_TAGS = ("script", "style", "noscript")


@dataclass(frozen=True)
class HarvestConfig:
    attributes: tuple = DEFAULT_ATTRIBUTES
    elements: tuple = DEFAULT_ELEMENTS
    header_selectors: tuple = DEFAULT_HEADER_SELECTORS
    table_name_separator: str = DEFAULT_TABLE_NAME_SEPARATOR
    pruned_tags: tuple = PRUNED_TAGS

    def __post_init__(self):
        # argparse hands us lists; keep the value hashable and read-only
        for field_name in ("attributes", "elements", "header_selectors", "pruned_tags"):
            object.__setattr__(self, field_name, tuple(getattr(self, field_name)))

    @property
    def header_selector(self):
        return ", ".join(self.header_selectors)

    @classmethod
    def from_args(cls, args):
        return cls(
            attributes=args.attributes,
            elements=args.elements,
            header_selectors=args.header_selectors,
            table_name_separator=args.table_name_separator,
        )
