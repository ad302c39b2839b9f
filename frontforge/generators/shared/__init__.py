"""Artifact fragments shared by every generator."""

from frontforge.generators.shared._json import deep_sort_dict, encode_json
from frontforge.generators.shared._versions import VERSIONS, version_of
from frontforge.generators.shared.configs import (
    TAILWIND_PLUGIN,
    VitePlugin,
    eslint_config,
    gitignore,
    readme,
    test_config_files,
    tsconfig_files,
    vite_config,
)
from frontforge.generators.shared.files import (
    bundler_config_path,
    component_ext,
    framework_package,
    html_entry_path,
    jsx_ext,
    main_entry_path,
    root_component_path,
    script_ext,
    typecheck_config_paths,
)
from frontforge.generators.shared.jsx import JSXWrapper, nest_jsx
from frontforge.generators.shared.manifest import (
    Packages,
    build_package_json,
    eslint_packages,
    option_packages,
    pin,
    test_scripts,
)
from frontforge.generators.shared.modules import data_fetching_files, import_path, query_client_module
from frontforge.generators.shared.structure import directory_layout, features_dir, services_dir, structure_files
from frontforge.generators.shared.styles import css_module_name, global_stylesheet, stylesheet_files, stylesheet_import
from frontforge.generators.shared.templates import build_context, get_template_dir, render_template, run_command

__all__ = (
    "TAILWIND_PLUGIN",
    "VERSIONS",
    "Packages",
    "JSXWrapper",
    "VitePlugin",
    "build_context",
    "build_package_json",
    "bundler_config_path",
    "component_ext",
    "css_module_name",
    "data_fetching_files",
    "deep_sort_dict",
    "directory_layout",
    "encode_json",
    "eslint_config",
    "eslint_packages",
    "features_dir",
    "framework_package",
    "get_template_dir",
    "gitignore",
    "global_stylesheet",
    "html_entry_path",
    "import_path",
    "jsx_ext",
    "main_entry_path",
    "nest_jsx",
    "option_packages",
    "pin",
    "query_client_module",
    "readme",
    "render_template",
    "root_component_path",
    "run_command",
    "script_ext",
    "services_dir",
    "structure_files",
    "stylesheet_files",
    "stylesheet_import",
    "test_config_files",
    "test_scripts",
    "tsconfig_files",
    "typecheck_config_paths",
    "version_of",
    "vite_config",
)
