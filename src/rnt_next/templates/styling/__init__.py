"""styled-components or Tailwind specific files.

Each styling approach owns its own variant of the root layout; the two
variants share a path and never apply together.
"""

from rnt_next.config import ProjectConfig
from rnt_next.templates import (
    TemplateCatalog,
    TemplateDescriptor,
    styled_components,
    tailwind,
)


# =============================================================================
# styled-components
# =============================================================================

def render_global_styles(config: ProjectConfig) -> str:
    return """'use client'

import styled, { createGlobalStyle } from 'styled-components'
import { media, theme } from './theme'

export const GlobalStyles = createGlobalStyle`
  * {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
  }

  html {
    scroll-behavior: smooth;
  }

  body {
    background-color: ${theme.colors.baseBlue.dark20};
    color: ${theme.colors.textColor};
  }

  .container {
    max-width: 1024px;
    margin: 0 auto;
    width: 100%;

    ${media.pc} {
      width: 95%;
    }
  }
`

export const OverlayBlur = styled.div`
  position: absolute;
  top: 0;
  left: 0;
  width: 100%;
  height: 100%;
  backdrop-filter: blur(5px);
  z-index: 100;
`
"""


def render_animations(config: ProjectConfig) -> str:
    return """'use client'

import { keyframes } from 'styled-components'

export const fadeIn = keyframes`
  from {
    opacity: 0;
  }
  to {
    opacity: 1;
  }
`

export const slideUp = keyframes`
  from {
    transform: translateY(20px);
    opacity: 0;
  }
  to {
    transform: translateY(0);
    opacity: 1;
  }
`

export const spin = keyframes`
  from {
    transform: rotate(0deg);
  }
  to {
    transform: rotate(360deg);
  }
`
"""


def render_registry(config: ProjectConfig) -> str:
    return """'use client'

// Collects styles rendered on the server so they are sent with the HTML

import { useServerInsertedHTML } from 'next/navigation'
import React, { useState } from 'react'
import { ServerStyleSheet, StyleSheetManager } from 'styled-components'

export default function StyledComponentsRegistry({ children }: { children: React.ReactNode }) {
  const [styledComponentsStyleSheet] = useState(() => new ServerStyleSheet())

  useServerInsertedHTML(() => {
    const styles = styledComponentsStyleSheet.getStyleElement()
    styledComponentsStyleSheet.instance.clearTag()
    return <>{styles}</>
  })

  if (typeof window !== 'undefined') return <>{children}</>

  return <StyleSheetManager sheet={styledComponentsStyleSheet.instance}>{children}</StyleSheetManager>
}
"""


# =============================================================================
# Tailwind
# =============================================================================

def render_globals_css(config: ProjectConfig) -> str:
    return """@import "tailwindcss";

* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
  list-style: none;
}

html {
  scroll-behavior: smooth;
}

body {
  font-family: 'Inter', 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
  background-color: #011627;
  color: #fff;
  transition: background-color 0.3s, color 0.3s;
}

.container {
  max-width: 1024px;
  margin: 0 auto;
}
"""


# =============================================================================
# Root layout
# =============================================================================

def _toaster(indent: str) -> str:
    return indent + "<Toaster position=\"top-center\" toastOptions={{ duration: 2000 }} />\n"


def _layout_chrome(config: ProjectConfig, indent: str):
    """Header/Footer imports and the JSX wrapping {children}."""
    imports = []
    if config.include_examples:
        imports.append("import Footer from '@/components/layout/footer/Footer'")
        imports.append("import Header from '@/components/layout/header/Header'")
    body = [f"{indent}<Header />"] if config.include_examples else []
    body.append(f"{indent}{{children}}")
    if config.include_examples:
        body.append(f"{indent}<Footer />")
    return imports, "\n".join(body) + "\n"


def _metadata(config: ProjectConfig) -> str:
    return (
        "export const metadata: Metadata = {\n"
        f"  title: '{config.directory_name}',\n"
        "  description: 'Next.js app generated by rnt-next'\n"
        "}\n"
    )


def render_styled_layout(config: ProjectConfig) -> str:
    chrome_imports, children = _layout_chrome(config, "            ")
    imports = chrome_imports + [
        "import { Providers } from '@/components/providers'",
        "import StyledComponentsRegistry from '@/lib/styled-components-registry'",
        "import { GlobalStyles } from '@/styles/globalStyles'",
        "import type { Metadata } from 'next'",
    ]
    toaster = ""
    if config.install_extra_dependencies:
        imports.append("import { Toaster } from 'react-hot-toast'")
        toaster = _toaster("            ")
    return (
        "\n".join(imports)
        + "\n\n"
        + _metadata(config)
        + """
export default function RootLayout({ children }: { children: React.ReactNode }) {
  return (
    <html lang="en">
      <body>
        <StyledComponentsRegistry>
          <GlobalStyles />
          <Providers>
"""
        + children
        + toaster
        + """          </Providers>
        </StyledComponentsRegistry>
      </body>
    </html>
  )
}
"""
    )


def render_tailwind_layout(config: ProjectConfig) -> str:
    chrome_imports, children = _layout_chrome(config, "          ")
    imports = chrome_imports + [
        "import { Providers } from '@/components/providers'",
        "import type { Metadata } from 'next'",
        "import { Inter } from 'next/font/google'",
        "import './globals.css'",
    ]
    toaster = ""
    if config.install_extra_dependencies:
        imports.append("import { Toaster } from 'react-hot-toast'")
        toaster = _toaster("          ")
    return (
        "\n".join(imports)
        + "\n\nconst inter = Inter({ subsets: ['latin'] })\n\n"
        + _metadata(config)
        + """
export default function RootLayout({ children }: { children: React.ReactNode }) {
  return (
    <html lang="en">
      <body className={inter.className}>
        <Providers>
"""
        + children
        + toaster
        + """        </Providers>
      </body>
    </html>
  )
}
"""
    )


def register_styling_templates(catalog: TemplateCatalog) -> None:
    catalog.register(TemplateDescriptor("src/styles/globalStyles.tsx", render_global_styles, when=styled_components))
    catalog.register(TemplateDescriptor("src/styles/animations.tsx", render_animations, when=styled_components))
    catalog.register(TemplateDescriptor(
        "src/lib/styled-components-registry.tsx", render_registry, when=styled_components
    ))
    catalog.register(TemplateDescriptor("src/app/globals.css", render_globals_css, when=tailwind))
    catalog.register(TemplateDescriptor("src/app/layout.tsx", render_styled_layout, when=styled_components))
    catalog.register(TemplateDescriptor("src/app/layout.tsx", render_tailwind_layout, when=tailwind))
