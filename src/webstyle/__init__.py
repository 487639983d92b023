"""webstyle: compile typed style descriptors into utility-class tokens."""

__version__ = "0.1.0"

from webstyle.builder import StyleBlock, StyleBuilder, apply_block, scoped, style_block  # noqa: E402
from webstyle.config import WebStyleConfig  # noqa: E402
from webstyle.elements import Element, Text  # noqa: E402
from webstyle.errors import (  # noqa: E402
    BuilderClosedError,
    SheetSyntaxError,
    StyleValueError,
    WebStyleError,
)
from webstyle.modifiers import (  # noqa: E402
    BREAKPOINTS,
    MODIFIERS,
    STATES,
    Modifier,
    apply_modifiers,
    apply_modifiers_separately,
    modifier_prefix,
)
from webstyle.rules import RULES, color_rule, compile_style  # noqa: E402
from webstyle.styling import Styled, apply_to, style_tokens  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "StyleBuilder",
    "StyleBlock",
    "style_block",
    "scoped",
    "apply_block",
    # config
    "WebStyleConfig",
    # elements
    "Element",
    "Text",
    # errors
    "WebStyleError",
    "SheetSyntaxError",
    "StyleValueError",
    "BuilderClosedError",
    # modifiers
    "Modifier",
    "BREAKPOINTS",
    "STATES",
    "MODIFIERS",
    "modifier_prefix",
    "apply_modifiers",
    "apply_modifiers_separately",
    # rules
    "RULES",
    "compile_style",
    "color_rule",
    # styling
    "Styled",
    "apply_to",
    "style_tokens",
]
