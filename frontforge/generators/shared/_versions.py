"""Dependency version ranges written into generated manifests."""

__all__ = ("VERSIONS", "version_of")

VERSIONS: dict[str, str] = {
    # build tooling
    "vite": "^7.2.7",
    "typescript": "^5.9.3",
    "@types/node": "^24.10.2",
    # linting
    "eslint": "^9.39.1",
    "@eslint/js": "^9.39.1",
    "globals": "^16.5.0",
    "typescript-eslint": "^8.49.0",
    "eslint-plugin-react-hooks": "^7.0.1",
    "eslint-plugin-react-refresh": "^0.4.24",
    "eslint-plugin-vue": "^10.6.2",
    "eslint-plugin-svelte": "^3.13.1",
    "eslint-config-next": "^16.0.8",
    "eslint-plugin-astro": "^1.5.0",
    # react
    "react": "^19.2.1",
    "react-dom": "^19.2.1",
    "@vitejs/plugin-react": "^5.1.2",
    "@types/react": "^19.2.7",
    "@types/react-dom": "^19.2.3",
    # vue
    "vue": "^3.5.25",
    "@vitejs/plugin-vue": "^6.0.2",
    "vue-tsc": "^3.1.5",
    # svelte
    "svelte": "^5.45.6",
    "@sveltejs/vite-plugin-svelte": "^6.2.1",
    "svelte-check": "^4.3.4",
    "@tsconfig/svelte": "^5.0.6",
    # solid
    "solid-js": "^1.9.10",
    "vite-plugin-solid": "^2.11.10",
    # angular
    "@angular/common": "^21.0.3",
    "@angular/compiler": "^21.0.3",
    "@angular/core": "^21.0.3",
    "@angular/forms": "^21.0.3",
    "@angular/platform-browser": "^21.0.3",
    "@angular/router": "^21.0.3",
    "@angular/build": "^21.0.2",
    "@angular/compiler-cli": "^21.0.3",
    "@analogjs/vite-plugin-angular": "^2.1.2",
    "rxjs": "^7.8.2",
    "tslib": "^2.8.1",
    # meta frameworks
    "next": "^16.0.8",
    "astro": "^5.16.4",
    "@astrojs/check": "^0.9.6",
    "@sveltejs/kit": "^2.49.1",
    "@sveltejs/adapter-auto": "^7.0.0",
    # styling
    "tailwindcss": "^4.1.18",
    "@tailwindcss/vite": "^4.1.18",
    "@tailwindcss/postcss": "^4.1.18",
    "bootstrap": "^5.3.8",
    "sass": "^1.95.0",
    "styled-components": "^6.1.19",
    # routing
    "react-router": "^7.10.1",
    "@tanstack/react-router": "^1.140.2",
    "vue-router": "^4.6.3",
    "@solidjs/router": "^0.15.4",
    # state management
    "zustand": "^5.0.9",
    "@reduxjs/toolkit": "^2.11.1",
    "react-redux": "^9.2.0",
    "pinia": "^3.0.4",
    "vuex": "^4.1.0",
    "@ngrx/store": "^20.1.0",
    # data fetching
    "@tanstack/react-query": "^5.90.12",
    "@tanstack/react-query-devtools": "^5.91.1",
    "@tanstack/vue-query": "^5.92.1",
    "@tanstack/svelte-query": "^6.0.10",
    "@tanstack/solid-query": "^5.90.15",
    "axios": "^1.13.2",
    "swr": "^2.3.7",
    # testing
    "vitest": "^4.0.15",
    "jsdom": "^27.3.0",
    "@testing-library/jest-dom": "^6.9.1",
    "@testing-library/react": "^16.3.0",
    "@testing-library/vue": "^8.1.0",
    "@testing-library/svelte": "^5.2.9",
    "@solidjs/testing-library": "^0.8.10",
    "jest": "^30.2.0",
    "jest-environment-jsdom": "^30.2.0",
    "ts-jest": "^29.4.6",
    "@types/jest": "^30.0.0",
    "@playwright/test": "^1.57.0",
    # ui libraries
    "class-variance-authority": "^0.7.1",
    "clsx": "^2.1.1",
    "tailwind-merge": "^3.4.0",
    "@radix-ui/react-slot": "^1.2.4",
    "@mui/material": "^7.3.6",
    "@emotion/react": "^11.14.0",
    "@emotion/styled": "^11.14.1",
    "@chakra-ui/react": "^3.30.0",
    "antd": "^6.1.0",
    "@headlessui/react": "^2.2.9",
    "vuetify": "^3.11.3",
    "primevue": "^4.5.3",
    "@primeuix/themes": "^1.2.5",
    "element-plus": "^2.12.0",
    "naive-ui": "^2.43.2",
    "@angular/material": "^21.0.2",
    "@angular/cdk": "^21.0.2",
    "primeng": "^21.0.1",
    "ng-zorro-antd": "^21.0.0",
    # forms
    "react-hook-form": "^7.68.0",
    "@hookform/resolvers": "^5.2.2",
    "formik": "^2.4.9",
    "@tanstack/react-form": "^1.27.1",
    "vee-validate": "^4.15.1",
    "zod": "^4.1.13",
    "yup": "^1.7.1",
    # animation
    "motion": "^12.23.26",
    "gsap": "^3.13.0",
    "@formkit/auto-animate": "^0.9.0",
    "@react-spring/web": "^10.0.3",
    # icons
    "react-icons": "^5.5.0",
    "@heroicons/react": "^2.2.0",
    "@heroicons/vue": "^2.2.0",
    "lucide-react": "^0.559.0",
    "lucide-vue-next": "^0.559.0",
    "@lucide/svelte": "^0.559.0",
    "lucide-solid": "^0.559.0",
    "lucide-angular": "^0.559.0",
    "@fortawesome/fontawesome-svg-core": "^7.1.0",
    "@fortawesome/free-solid-svg-icons": "^7.1.0",
    "@fortawesome/react-fontawesome": "^3.1.1",
    "@fortawesome/vue-fontawesome": "^3.1.2",
    "@fortawesome/angular-fontawesome": "^4.0.0",
    # data visualization
    "recharts": "^3.5.1",
    "chart.js": "^4.5.1",
    "react-chartjs-2": "^5.3.1",
    "vue-chartjs": "^5.3.3",
    "echarts": "^6.0.0",
    "echarts-for-react": "^3.0.5",
    "vue-echarts": "^8.0.1",
    "@nivo/core": "^0.99.0",
    "@nivo/bar": "^0.99.0",
    # utilities
    "date-fns": "^4.1.0",
    "dayjs": "^1.11.19",
    "lodash-es": "^4.17.21",
    "@types/lodash-es": "^4.17.12",
    # i18n
    "i18next": "^25.7.2",
    "react-i18next": "^16.4.0",
    "vue-i18n": "^11.2.2",
}
"""Package name to semver range. Every package a generator emits must appear here."""


def version_of(package: str) -> str:
    """Return the version range for ``package``.

    Raises:
        KeyError: If the package has no pinned range.
    """
    return VERSIONS[package]
