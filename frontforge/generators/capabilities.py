"""Framework compatibility table.

One row per framework lists the values each option axis accepts. Generators
return their row from ``supported_options()`` and the orchestrator checks a
configuration against it once, before anything is generated.
"""

from frontforge.config import (
    Animation,
    DataFetching,
    DataViz,
    FormManagement,
    Framework,
    I18n,
    Icons,
    Language,
    Routing,
    StateManagement,
    Styling,
    Testing,
    UILibrary,
    Utilities,
)
from frontforge.generators.base import GeneratorCapability

__all__ = ("COMPATIBILITY",)

_ALL_UTILITIES = (Utilities.DATE_FNS, Utilities.DAYJS, Utilities.LODASH)
_SCHEMA_FORMS = (FormManagement.ZOD, FormManagement.YUP)
_META_STYLING = (Styling.TAILWIND, Styling.CSS_MODULES, Styling.SASS, Styling.VANILLA)

COMPATIBILITY: dict[Framework, GeneratorCapability] = {
    Framework.REACT: GeneratorCapability(
        styling=tuple(Styling),
        testing=(Testing.VITEST, Testing.JEST, Testing.PLAYWRIGHT),
        routing=(Routing.REACT_ROUTER, Routing.TANSTACK_ROUTER),
        state_management=(StateManagement.ZUSTAND, StateManagement.REDUX_TOOLKIT, StateManagement.CONTEXT_API),
        data_fetching=(DataFetching.TANSTACK_QUERY, DataFetching.SWR, DataFetching.AXIOS, DataFetching.FETCH_API),
        ui_library=(UILibrary.SHADCN, UILibrary.MUI, UILibrary.CHAKRA, UILibrary.ANT_DESIGN, UILibrary.HEADLESS_UI),
        form_management=(
            FormManagement.REACT_HOOK_FORM,
            FormManagement.FORMIK,
            FormManagement.TANSTACK_FORM,
            *_SCHEMA_FORMS,
        ),
        animation=(Animation.FRAMER_MOTION, Animation.GSAP, Animation.AUTO_ANIMATE, Animation.REACT_SPRING),
        icons=(Icons.REACT_ICONS, Icons.HEROICONS, Icons.LUCIDE, Icons.FONT_AWESOME),
        data_viz=(DataViz.RECHARTS, DataViz.CHARTJS, DataViz.ECHARTS, DataViz.NIVO),
        utilities=_ALL_UTILITIES,
        i18n=(I18n.REACT_I18NEXT,),
    ),
    Framework.VUE: GeneratorCapability(
        styling=(Styling.TAILWIND, Styling.BOOTSTRAP, Styling.CSS_MODULES, Styling.SASS, Styling.VANILLA),
        testing=(Testing.VITEST, Testing.JEST, Testing.PLAYWRIGHT),
        routing=(Routing.VUE_ROUTER,),
        state_management=(StateManagement.PINIA, StateManagement.VUEX),
        data_fetching=(DataFetching.TANSTACK_QUERY, DataFetching.AXIOS, DataFetching.FETCH_API),
        ui_library=(UILibrary.VUETIFY, UILibrary.PRIMEVUE, UILibrary.ELEMENT_PLUS, UILibrary.NAIVE_UI),
        form_management=(FormManagement.VEE_VALIDATE, *_SCHEMA_FORMS),
        animation=(Animation.GSAP, Animation.AUTO_ANIMATE),
        icons=(Icons.HEROICONS, Icons.LUCIDE, Icons.FONT_AWESOME),
        data_viz=(DataViz.CHARTJS, DataViz.ECHARTS),
        utilities=_ALL_UTILITIES,
        i18n=(I18n.VUE_I18N,),
    ),
    Framework.SVELTE: GeneratorCapability(
        styling=(Styling.TAILWIND, Styling.BOOTSTRAP, Styling.SASS, Styling.VANILLA),
        testing=(Testing.VITEST, Testing.PLAYWRIGHT),
        routing=(),
        state_management=(StateManagement.SVELTE_STORES,),
        data_fetching=(DataFetching.TANSTACK_QUERY, DataFetching.AXIOS, DataFetching.FETCH_API),
        ui_library=(),
        form_management=_SCHEMA_FORMS,
        animation=(Animation.GSAP, Animation.AUTO_ANIMATE),
        icons=(Icons.LUCIDE,),
        data_viz=(DataViz.CHARTJS, DataViz.ECHARTS),
        utilities=_ALL_UTILITIES,
        i18n=(),
    ),
    Framework.SOLID: GeneratorCapability(
        styling=(Styling.TAILWIND, Styling.BOOTSTRAP, Styling.CSS_MODULES, Styling.SASS, Styling.VANILLA),
        testing=(Testing.VITEST,),
        routing=(Routing.SOLID_ROUTER,),
        state_management=(StateManagement.SOLID_STORES,),
        data_fetching=(DataFetching.TANSTACK_QUERY, DataFetching.AXIOS, DataFetching.FETCH_API),
        ui_library=(),
        form_management=_SCHEMA_FORMS,
        animation=(Animation.GSAP, Animation.AUTO_ANIMATE),
        icons=(Icons.LUCIDE,),
        data_viz=(DataViz.CHARTJS, DataViz.ECHARTS),
        utilities=_ALL_UTILITIES,
        i18n=(),
    ),
    Framework.ANGULAR: GeneratorCapability(
        languages=(Language.TYPESCRIPT,),
        styling=(Styling.TAILWIND, Styling.BOOTSTRAP, Styling.SASS, Styling.VANILLA),
        testing=(Testing.VITEST, Testing.PLAYWRIGHT),
        routing=(Routing.ANGULAR_ROUTER,),
        state_management=(StateManagement.NGRX,),
        data_fetching=(DataFetching.AXIOS, DataFetching.FETCH_API),
        ui_library=(UILibrary.ANGULAR_MATERIAL, UILibrary.PRIMENG, UILibrary.NG_ZORRO),
        form_management=_SCHEMA_FORMS,
        animation=(Animation.GSAP,),
        icons=(Icons.LUCIDE, Icons.FONT_AWESOME),
        data_viz=(DataViz.CHARTJS, DataViz.ECHARTS),
        utilities=_ALL_UTILITIES,
        i18n=(),
    ),
    Framework.VANILLA: GeneratorCapability(
        styling=(Styling.TAILWIND, Styling.BOOTSTRAP, Styling.SASS, Styling.VANILLA),
        testing=(Testing.VITEST, Testing.PLAYWRIGHT),
        routing=(),
        state_management=(),
        data_fetching=(DataFetching.AXIOS, DataFetching.FETCH_API),
        ui_library=(),
        form_management=_SCHEMA_FORMS,
        animation=(Animation.GSAP, Animation.AUTO_ANIMATE),
        icons=(),
        data_viz=(DataViz.CHARTJS, DataViz.ECHARTS),
        utilities=_ALL_UTILITIES,
        i18n=(),
    ),
    Framework.NEXTJS: GeneratorCapability(
        styling=_META_STYLING,
        testing=(Testing.VITEST, Testing.JEST),
        routing=(Routing.NEXTJS_APP_ROUTER,),
        state_management=(StateManagement.ZUSTAND, StateManagement.REDUX_TOOLKIT, StateManagement.CONTEXT_API),
        data_fetching=(DataFetching.TANSTACK_QUERY, DataFetching.SWR, DataFetching.AXIOS, DataFetching.FETCH_API),
    ),
    Framework.ASTRO: GeneratorCapability(
        styling=_META_STYLING,
        testing=(Testing.VITEST,),
        routing=(Routing.ASTRO_PAGES,),
    ),
    Framework.SVELTEKIT: GeneratorCapability(
        styling=_META_STYLING,
        testing=(Testing.VITEST, Testing.PLAYWRIGHT),
        routing=(Routing.SVELTEKIT,),
        state_management=(StateManagement.SVELTE_STORES,),
        data_fetching=(DataFetching.TANSTACK_QUERY, DataFetching.FETCH_API),
    ),
}
"""Framework -> axis -> allowed values. An absent axis is not offered by the framework."""
