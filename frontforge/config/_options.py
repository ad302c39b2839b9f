"""Option enumerations for project configuration.

Each enumeration value is the label shown to users. Every optional axis has a
``NONE`` member whose value is ``"None"``.
"""

import re
from enum import Enum
from typing import TypeVar

from frontforge.exceptions import ConfigurationError

__all__ = (
    "Animation",
    "DataFetching",
    "DataViz",
    "Framework",
    "FormManagement",
    "I18n",
    "Icons",
    "Language",
    "PackageManager",
    "Routing",
    "StateManagement",
    "Structure",
    "Styling",
    "Testing",
    "UILibrary",
    "Utilities",
    "parse_option",
)

E = TypeVar("E", bound=Enum)

NONE_VALUE = "None"


class Language(str, Enum):
    """Source language of the generated project."""

    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"

    @property
    def is_typescript(self) -> bool:
        return self is Language.TYPESCRIPT


class Framework(str, Enum):
    """Supported frontend frameworks."""

    REACT = "React"
    VUE = "Vue"
    ANGULAR = "Angular"
    SVELTE = "Svelte"
    SOLID = "Solid"
    VANILLA = "Vanilla"
    NEXTJS = "Next.js"
    ASTRO = "Astro"
    SVELTEKIT = "SvelteKit"

    @property
    def is_meta(self) -> bool:
        """Whether the framework owns its build pipeline instead of a shared Vite config."""
        return self in {Framework.NEXTJS, Framework.ASTRO, Framework.SVELTEKIT}

    @property
    def slug(self) -> str:
        return self.name.lower()


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


class Styling(str, Enum):
    TAILWIND = "Tailwind CSS"
    BOOTSTRAP = "Bootstrap"
    CSS_MODULES = "CSS Modules"
    SASS = "Sass/SCSS"
    STYLED_COMPONENTS = "Styled Components"
    VANILLA = "Vanilla CSS"


class Routing(str, Enum):
    REACT_ROUTER = "React Router"
    TANSTACK_ROUTER = "TanStack Router"
    VUE_ROUTER = "Vue Router"
    ANGULAR_ROUTER = "Angular Router"
    SOLID_ROUTER = "Solid Router"
    NEXTJS_APP_ROUTER = "Next.js App Router"
    ASTRO_PAGES = "Astro Pages"
    SVELTEKIT = "SvelteKit"
    NONE = NONE_VALUE


class Testing(str, Enum):
    VITEST = "Vitest"
    JEST = "Jest"
    PLAYWRIGHT = "Playwright"
    NONE = NONE_VALUE


class StateManagement(str, Enum):
    ZUSTAND = "Zustand"
    REDUX_TOOLKIT = "Redux Toolkit"
    CONTEXT_API = "Context API"
    PINIA = "Pinia"
    VUEX = "Vuex"
    SVELTE_STORES = "Svelte Stores"
    SOLID_STORES = "Solid Stores"
    NGRX = "NgRx"
    NONE = NONE_VALUE


class DataFetching(str, Enum):
    TANSTACK_QUERY = "TanStack Query"
    SWR = "SWR"
    AXIOS = "Axios"
    FETCH_API = "Fetch API"
    NONE = NONE_VALUE


class UILibrary(str, Enum):
    SHADCN = "Shadcn/ui"
    MUI = "Material-UI (MUI)"
    CHAKRA = "Chakra UI"
    ANT_DESIGN = "Ant Design"
    HEADLESS_UI = "Headless UI"
    VUETIFY = "Vuetify"
    PRIMEVUE = "PrimeVue"
    ELEMENT_PLUS = "Element Plus"
    NAIVE_UI = "Naive UI"
    ANGULAR_MATERIAL = "Angular Material"
    PRIMENG = "PrimeNG"
    NG_ZORRO = "NG-ZORRO"
    NONE = NONE_VALUE


class FormManagement(str, Enum):
    REACT_HOOK_FORM = "React Hook Form"
    FORMIK = "Formik"
    TANSTACK_FORM = "TanStack Form"
    VEE_VALIDATE = "VeeValidate"
    ZOD = "Zod"
    YUP = "Yup"
    NONE = NONE_VALUE


class Animation(str, Enum):
    FRAMER_MOTION = "Framer Motion"
    GSAP = "GSAP"
    AUTO_ANIMATE = "Auto Animate"
    REACT_SPRING = "React Spring"
    NONE = NONE_VALUE


class Icons(str, Enum):
    REACT_ICONS = "React Icons"
    HEROICONS = "Heroicons"
    LUCIDE = "Lucide"
    FONT_AWESOME = "Font Awesome"
    NONE = NONE_VALUE


class DataViz(str, Enum):
    RECHARTS = "Recharts"
    CHARTJS = "Chart.js"
    ECHARTS = "Apache ECharts"
    NIVO = "Nivo"
    NONE = NONE_VALUE


class Utilities(str, Enum):
    DATE_FNS = "date-fns"
    DAYJS = "Day.js"
    LODASH = "Lodash-es"
    NONE = NONE_VALUE


class I18n(str, Enum):
    REACT_I18NEXT = "react-i18next"
    VUE_I18N = "vue-i18n"
    NONE = NONE_VALUE


class Structure(str, Enum):
    FEATURE_BASED = "Feature-based"
    LAYER_BASED = "Layer-based"


# Short spellings accepted on the command line, mapped to member names.
_ALIASES: dict[type[Enum], dict[str, str]] = {
    Framework: {"next": "NEXTJS", "kit": "SVELTEKIT"},
    Language: {"ts": "TYPESCRIPT", "js": "JAVASCRIPT"},
    Styling: {
        "tailwind": "TAILWIND",
        "scss": "SASS",
        "styled": "STYLED_COMPONENTS",
        "css": "VANILLA",
    },
    Routing: {"tanstack": "TANSTACK_ROUTER", "approuter": "NEXTJS_APP_ROUTER", "astro": "ASTRO_PAGES"},
    StateManagement: {"redux": "REDUX_TOOLKIT", "context": "CONTEXT_API", "svelte": "SVELTE_STORES", "solid": "SOLID_STORES"},
    DataFetching: {"tanstack": "TANSTACK_QUERY", "reactquery": "TANSTACK_QUERY", "fetch": "FETCH_API"},
    UILibrary: {"shadcn": "SHADCN", "materialui": "MUI", "chakra": "CHAKRA", "antd": "ANT_DESIGN", "headless": "HEADLESS_UI"},
    FormManagement: {"rhf": "REACT_HOOK_FORM", "tanstack": "TANSTACK_FORM"},
    Animation: {"framer": "FRAMER_MOTION", "motion": "FRAMER_MOTION", "autoanimate": "AUTO_ANIMATE"},
    Icons: {"fontawesome": "FONT_AWESOME", "lucidereact": "LUCIDE"},
    DataViz: {"chartjs": "CHARTJS", "echarts": "ECHARTS"},
    Utilities: {"lodash": "LODASH", "dayjs": "DAYJS", "datefns": "DATE_FNS"},
    I18n: {"i18next": "REACT_I18NEXT"},
    Structure: {"feature": "FEATURE_BASED", "layer": "LAYER_BASED"},
}


def _squash(text: str) -> str:
    return re.sub(r"[^a-z0-9]", "", text.lower())


def parse_option(enum_cls: "type[E]", text: "str | E") -> E:
    """Resolve user input to a member of ``enum_cls``.

    Matching ignores case and punctuation, so ``"css-modules"`` resolves to
    ``Styling.CSS_MODULES`` and ``"next.js"`` to ``Framework.NEXTJS``.

    Args:
        enum_cls: The option enumeration to resolve against.
        text: A member, a member value, a member name or a known alias.

    Raises:
        ConfigurationError: If the input matches no member.

    Returns:
        The matching enumeration member.
    """
    if isinstance(text, enum_cls):
        return text
    key = _squash(str(text))
    for member in enum_cls:
        if key in {_squash(member.name), _squash(str(member.value))}:
            return member
    alias = _ALIASES.get(enum_cls, {}).get(key)
    if alias is not None:
        return enum_cls[alias]
    choices = ", ".join(str(member.value) for member in enum_cls)
    msg = f"Unknown {enum_cls.__name__} option {text!r}. Expected one of: {choices}"
    raise ConfigurationError(msg, axis=enum_cls.__name__, value=str(text))
