"""Editor, formatter and Next.js configuration files."""

import json

from rnt_next.config import ProjectConfig
from rnt_next.templates import TemplateCatalog, TemplateDescriptor


IMAGE_DOMAINS = ["placehold.co", "res.cloudinary.com", "api.cloudinary.com"]


def _json(data: dict) -> str:
    return json.dumps(data, indent=2) + "\n"


def render_next_config(config: ProjectConfig) -> str:
    compiler = ""
    if config.uses_styled_components:
        compiler = """  compiler: {
    styledComponents: true,
  },
"""
    domains = ", ".join(f"'{domain}'" for domain in IMAGE_DOMAINS)
    return (
        "/** @type {import('next').NextConfig} */\n"
        "const nextConfig = {\n"
        f"{compiler}"
        "  images: {\n"
        "    formats: ['image/avif', 'image/webp'],\n"
        f"    domains: [{domains}],\n"
        "  },\n"
        "}\n"
        "\n"
        "export default nextConfig\n"
    )


def render_vscode_settings(config: ProjectConfig) -> str:
    return _json({
        "editor.formatOnSave": True,
        "editor.codeActionsOnSave": {
            "source.fixAll.eslint": True,
            "source.fixAll": True,
        },
        "editor.defaultFormatter": "esbenp.prettier-vscode",
        "[typescriptreact]": {
            "editor.defaultFormatter": "vscode.typescript-language-features",
        },
        "typescript.tsdk": "node_modules/typescript/lib",
    })


def render_prettier(config: ProjectConfig) -> str:
    return _json({
        "trailingComma": "none",
        "semi": False,
        "singleQuote": True,
        "printWidth": 150,
        "arrowParens": "avoid",
    })


def render_editorconfig(config: ProjectConfig) -> str:
    return """root = true

[*]
indent_style = space
indent_size = 2
end_of_line = lf
charset = utf-8
trim_trailing_whitespace = true
insert_final_newline = true
"""


_STYLED_THEME_TYPES = """
declare module 'styled-components' {
  export interface DefaultTheme {
    colors: {
      baseBlue: ColorVariants
      baseGreen: ColorVariants
      baseRed: ColorVariants
      baseCyan: ColorVariants
      primaryColor: string
      secondaryColor: string
      textColor: string
      [key: string]: string | ColorVariants
    }
  }
}
"""


def render_types(config: ProjectConfig) -> str:
    lines = []
    if config.uses_styled_components:
        lines.append("import 'styled-components'")
        lines.append("import { ColorVariants } from './src/utils/colorUtils'")
    lines.append("import { store } from './src/redux/store'")
    content = "\n".join(lines) + """

export type RootState = ReturnType<typeof store.getState>
export type AppDispatch = typeof store.dispatch

declare module 'react-redux' {
  type DefaultRootState = RootState
}
"""
    if config.uses_styled_components:
        content += _STYLED_THEME_TYPES
    return content


def register_config_templates(catalog: TemplateCatalog) -> None:
    catalog.register(TemplateDescriptor("next.config.mjs", render_next_config))
    catalog.register(TemplateDescriptor(".vscode/settings.json", render_vscode_settings))
    catalog.register(TemplateDescriptor(".prettierrc.json", render_prettier))
    catalog.register(TemplateDescriptor(".editorconfig", render_editorconfig))
    catalog.register(TemplateDescriptor("types.d.ts", render_types))
