"""Vue generator."""

from typing import TYPE_CHECKING, ClassVar

from frontforge.config import DataFetching, Framework, I18n, Routing, StateManagement, UILibrary
from frontforge.generators.core._base import ViteGenerator
from frontforge.generators.shared import (
    Packages,
    VitePlugin,
    build_context,
    render_template,
    script_ext,
    stylesheet_import,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("VueGenerator",)

# Component libraries installed as app plugins: imports, then the ``app.use`` call.
_UI_PLUGINS: dict[UILibrary, tuple[tuple[str, ...], str]] = {
    UILibrary.VUETIFY: (
        ("import 'vuetify/styles'", "import { createVuetify } from 'vuetify'"),
        "app.use(createVuetify())",
    ),
    UILibrary.PRIMEVUE: (
        ("import PrimeVue from 'primevue/config'", "import Aura from '@primeuix/themes/aura'"),
        "app.use(PrimeVue, { theme: { preset: Aura } })",
    ),
    UILibrary.ELEMENT_PLUS: (
        ("import ElementPlus from 'element-plus'", "import 'element-plus/dist/index.css'"),
        "app.use(ElementPlus)",
    ),
}


class VueGenerator(ViteGenerator):
    """Vue 3 with Vite."""

    framework = Framework.VUE
    mount_id: ClassVar[str] = "app"
    typecheck_script: ClassVar["str | None"] = "vue-tsc -b"

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        dev = ["@vitejs/plugin-vue"]
        if config.is_typescript:
            dev.append("vue-tsc")
        return Packages(("vue",), tuple(dev))

    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        return [VitePlugin("import vue from '@vitejs/plugin-vue'", "vue()")]

    def main_entry(self, config: "ProjectConfig") -> str:
        imports = ["import { createApp } from 'vue'"]
        setup = ["const app = createApp(App)"]
        if config.routing is Routing.VUE_ROUTER:
            imports.append("import router from './router'")
            setup.append("app.use(router)")
        match config.state_management:
            case StateManagement.PINIA:
                imports.append("import { createPinia } from 'pinia'")
                setup.append("app.use(createPinia())")
            case StateManagement.VUEX:
                imports.append("import { store } from './store'")
                setup.append("app.use(store)")
            case _:
                pass
        if config.data_fetching is DataFetching.TANSTACK_QUERY:
            imports.append("import { VueQueryPlugin } from '@tanstack/vue-query'")
            setup.append("app.use(VueQueryPlugin)")
        if config.i18n is I18n.VUE_I18N:
            imports.append("import { i18n } from './i18n'")
            setup.append("app.use(i18n)")
        plugin = _UI_PLUGINS.get(config.ui_library)
        if plugin is not None:
            plugin_imports, use = plugin
            imports += plugin_imports
            setup.append(use)
        style = stylesheet_import(config)
        if style:
            imports.append(style)
        imports.append("import App from './App.vue'")
        return "\n".join([*imports, "", *setup, "app.mount('#app')", ""])

    def root_component(self, config: "ProjectConfig") -> str:
        return render_template("vue/App.vue.j2", build_context(config))

    def extra_files(self, config: "ProjectConfig") -> dict[str, str]:
        ext = script_ext(config)
        context = build_context(config)
        files: dict[str, str] = {}
        if config.routing is Routing.VUE_ROUTER:
            files[f"src/router/index.{ext}"] = render_template("vue/router.js.j2", context)
            files["src/views/HomeView.vue"] = render_template("vue/HomeView.vue.j2", context)
        match config.state_management:
            case StateManagement.PINIA:
                files[f"src/stores/counter.{ext}"] = render_template("vue/pinia-store.js.j2", context)
            case StateManagement.VUEX:
                files[f"src/store/index.{ext}"] = render_template("vue/vuex-store.js.j2", context)
            case _:
                pass
        if config.i18n is I18n.VUE_I18N:
            files[f"src/i18n.{ext}"] = render_template("vue/i18n.js.j2", context)
        if config.is_typescript:
            files["src/vite-env.d.ts"] = render_template("vue/vite-env.d.ts.j2", context)
        return files
