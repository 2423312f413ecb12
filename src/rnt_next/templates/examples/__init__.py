"""Example pages and UI components.

Only generated when the user asks for a complete project. Components
that import the extra bundle (framer-motion, formik, react-imask) also
require install_extra_dependencies.
"""

from rnt_next.config import ProjectConfig
from rnt_next.templates import (
    TemplateCatalog,
    TemplateDescriptor,
    all_of,
    styled_components,
    tailwind,
    with_examples,
    with_extras,
)


# =============================================================================
# Pages
# =============================================================================

def render_styled_home(config: ProjectConfig) -> str:
    return """'use client'

import { theme } from '@/styles/theme'
import styled from 'styled-components'

const MainContainer = styled.div`
  width: 100%;
  min-height: 100vh;
  display: flex;
  flex-direction: column;
  background-image: linear-gradient(to bottom, ${theme.colors.baseBlack.light20}, ${theme.colors.baseBlack.dark30});
  padding: 60px 20px;
`

const HeroSection = styled.section`
  text-align: center;
  margin-bottom: 80px;

  h1 {
    font-size: 3.5rem;
    font-weight: 700;
    margin-bottom: 20px;
    background: linear-gradient(360deg, ${theme.colors.baseBlue.base}, ${theme.colors.baseBlue.light20});
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
    background-clip: text;
  }

  p {
    font-size: 1.25rem;
    color: ${theme.colors.baseBlue.light30};
    max-width: 600px;
    margin: 0 auto;
    line-height: 1.6;
  }
`

export default function Home() {
  return (
    <MainContainer>
      <HeroSection>
        <h1>""" + config.directory_name + """</h1>
        <p>Generated with rnt-next. Styled Components is configured and ready.</p>
      </HeroSection>
    </MainContainer>
  )
}
"""


def render_tailwind_home(config: ProjectConfig) -> str:
    return """export default function Home() {
  return (
    <div className="min-h-screen flex flex-col bg-[#011627] px-5 py-16 max-w-6xl mx-auto w-full">
      <section className="text-center mb-20">
        <h1 className="text-5xl md:text-6xl font-bold mb-5 bg-gradient-to-r from-blue-500 to-yellow-400 bg-clip-text text-transparent">
          """ + config.directory_name + """
        </h1>
        <p className="text-xl text-gray-400 max-w-2xl mx-auto leading-relaxed">
          Generated with rnt-next. Tailwind CSS is configured and ready.
        </p>
      </section>
    </div>
  )
}
"""


def _plain_layout(component: str) -> str:
    return (
        f"export default function {component}({{ children }}: {{ children: React.ReactNode }}) {{\n"
        "  return <div>{children}</div>\n"
        "}\n"
    )


def render_public_layout(config: ProjectConfig) -> str:
    return _plain_layout("PublicLayout")


def render_private_layout(config: ProjectConfig) -> str:
    return _plain_layout("PrivateLayout")


def render_styled_loading(config: ProjectConfig) -> str:
    return """'use client'

import { spin } from '@/styles/animations'
import { theme } from '@/styles/theme'
import styled from 'styled-components'

const LoadingContainer = styled.div`
  display: flex;
  justify-content: center;
  align-items: center;
  min-height: 50vh;
`

const Spinner = styled.div`
  border: 4px solid ${theme.colors.gray2};
  border-top: 4px solid ${theme.colors.blue2};
  border-radius: 50%;
  width: 40px;
  height: 40px;
  animation: ${spin} 2s linear infinite;
`

export default function Loading() {
  return (
    <LoadingContainer>
      <Spinner />
    </LoadingContainer>
  )
}
"""


def render_tailwind_loading(config: ProjectConfig) -> str:
    return """export default function Loading() {
  return (
    <div className="flex justify-center items-center min-h-[50vh]">
      <div className="border-4 border-gray-400 border-t-blue-500 rounded-full w-10 h-10 animate-spin"></div>
    </div>
  )
}
"""


def render_styled_not_found(config: ProjectConfig) -> str:
    return """'use client'

import { theme } from '@/styles/theme'
import Link from 'next/link'
import styled from 'styled-components'

const NotFoundContainer = styled.div`
  display: flex;
  flex-direction: column;
  align-items: center;
  justify-content: center;
  min-height: 50vh;
  text-align: center;
  padding: 20px;

  h1 {
    font-size: 4rem;
    color: ${theme.colors.blue2};
    margin-bottom: 20px;
  }

  p {
    color: ${theme.colors.gray2};
    margin-bottom: 30px;
    max-width: 500px;
  }
`

const BackButton = styled(Link)`
  background-color: ${theme.colors.blue2};
  color: white;
  padding: 12px 24px;
  border-radius: 8px;
  text-decoration: none;
`

export default function NotFound() {
  return (
    <NotFoundContainer>
      <h1>404</h1>
      <p>The page you are looking for does not exist or has been moved.</p>
      <BackButton href="/">Back to home</BackButton>
    </NotFoundContainer>
  )
}
"""


def render_tailwind_not_found(config: ProjectConfig) -> str:
    return """import Link from 'next/link'

export default function NotFound() {
  return (
    <div className="flex flex-col items-center justify-center min-h-[50vh] text-center p-5">
      <h1 className="text-6xl text-blue-500 mb-5">404</h1>
      <p className="text-gray-400 mb-8 max-w-lg">The page you are looking for does not exist or has been moved.</p>
      <Link href="/" className="bg-blue-500 hover:bg-blue-600 text-white px-6 py-3 rounded-lg transition-colors">
        Back to home
      </Link>
    </div>
  )
}
"""


# =============================================================================
# Layout components
# =============================================================================

_NAV_LINKS = (("Features", "/features"), ("Pricing", "/pricing"), ("Blog", "/blog"))


def render_styled_header(config: ProjectConfig) -> str:
    items = "\n".join(
        f"        <NavItem>\n          <Link href=\"{href}\">{label}</Link>\n        </NavItem>"
        for label, href in _NAV_LINKS
    )
    return (
        "'use client'\n\n"
        "import Link from 'next/link'\n"
        "import { HeaderContainer, Logo, NavItem, NavMenu } from './HeaderStyles'\n\n"
        "const Header = () => {\n"
        "  return (\n"
        "    <HeaderContainer>\n"
        f"      <Logo>{config.directory_name}</Logo>\n"
        "      <NavMenu>\n"
        f"{items}\n"
        "      </NavMenu>\n"
        "    </HeaderContainer>\n"
        "  )\n"
        "}\n\n"
        "export default Header\n"
    )


def render_header_styles(config: ProjectConfig) -> str:
    return """'use client'

import { media, theme } from '@/styles/theme'
import styled from 'styled-components'

export const HeaderContainer = styled.header`
  display: flex;
  align-items: center;
  justify-content: space-between;
  padding: 20px;
  background-color: ${theme.colors.primaryColor};
  border-bottom: 1px solid ${theme.colors.secondaryColor};
  position: sticky;
  top: 0;
  z-index: 100;

  ${media.tablet} {
    flex-direction: column;
    gap: 15px;
  }
`

export const Logo = styled.div`
  font-size: 1.8rem;
  font-weight: 700;
  color: ${theme.colors.textColor};
`

export const NavMenu = styled.nav`
  display: flex;
  gap: 30px;
`

export const NavItem = styled.div`
  a {
    text-decoration: none;
    color: ${theme.colors.textColor};
    font-weight: 500;
    transition: color 0.3s ease;

    &:hover {
      color: ${theme.colors.blue2};
    }
  }
`
"""


def render_tailwind_header(config: ProjectConfig) -> str:
    items = "\n".join(
        f"        <Link href=\"{href}\" className=\"text-white hover:text-blue-400 transition-colors\">{label}</Link>"
        for label, href in _NAV_LINKS
    )
    return (
        "import Link from 'next/link'\n\n"
        "const Header = () => {\n"
        "  return (\n"
        "    <header className=\"flex items-center justify-between p-5 bg-[#011627] border-b border-[#023864] sticky top-0 z-50\">\n"
        f"      <span className=\"text-white text-3xl font-bold\">{config.directory_name}</span>\n"
        "      <nav className=\"flex gap-8\">\n"
        f"{items}\n"
        "      </nav>\n"
        "    </header>\n"
        "  )\n"
        "}\n\n"
        "export default Header\n"
    )


_CURRENT_YEAR = """const getCurrentYear = () => new Date().getFullYear()
"""


def render_styled_footer(config: ProjectConfig) -> str:
    return (
        "'use client'\n\n"
        "import { FooterContainer } from './FooterStyles'\n\n"
        + _CURRENT_YEAR
        + "\nconst Footer = () => {\n"
        "  return (\n"
        "    <FooterContainer>\n"
        f"      <p>&copy; {{getCurrentYear()}} {config.directory_name}. All rights reserved.</p>\n"
        "    </FooterContainer>\n"
        "  )\n"
        "}\n\n"
        "export default Footer\n"
    )


def render_footer_styles(config: ProjectConfig) -> str:
    return """'use client'

import { theme } from '@/styles/theme'
import styled from 'styled-components'

export const FooterContainer = styled.footer`
  background-color: ${theme.colors.primaryColor};
  border-top: 1px solid ${theme.colors.secondaryColor};
  padding: 40px 20px 20px;
  margin-top: auto;
  text-align: center;

  p {
    color: ${theme.colors.textColor};
    font-size: 14px;
    opacity: 0.8;
  }
`
"""


def render_tailwind_footer(config: ProjectConfig) -> str:
    return (
        _CURRENT_YEAR
        + "\nconst Footer = () => {\n"
        "  return (\n"
        "    <footer className=\"bg-[#011627] border-t border-[#023864] py-10 px-5 mt-auto text-center\">\n"
        "      <p className=\"text-white text-sm opacity-80\">\n"
        f"        &copy; {{getCurrentYear()}} {config.directory_name}. All rights reserved.\n"
        "      </p>\n"
        "    </footer>\n"
        "  )\n"
        "}\n\n"
        "export default Footer\n"
    )


# =============================================================================
# UI components
# =============================================================================

def render_styled_button(config: ProjectConfig) -> str:
    return """'use client'

import React, { forwardRef } from 'react'
import { StyledButton } from './ButtonStyles'

type ButtonVariant = 'primary' | 'secondary' | 'outline' | 'danger'
type ButtonSize = 'sm' | 'md' | 'lg'

export interface ButtonProps extends React.ButtonHTMLAttributes<HTMLButtonElement> {
  variant?: ButtonVariant
  size?: ButtonSize
  loading?: boolean
  fullWidth?: boolean
}

export const Button = forwardRef<HTMLButtonElement, ButtonProps>(
  ({ variant = 'primary', size = 'md', loading = false, fullWidth = false, disabled, children, type = 'button', ...props }, ref) => (
    <StyledButton
      ref={ref}
      type={type}
      $variant={variant}
      $size={size}
      $fullWidth={fullWidth}
      disabled={disabled || loading}
      aria-busy={loading}
      {...props}
    >
      {loading ? '...' : children}
    </StyledButton>
  )
)

Button.displayName = 'Button'
export default Button
"""


def render_button_styles(config: ProjectConfig) -> str:
    return """import { theme, transitions } from '@/styles/theme'
import styled, { css } from 'styled-components'

type StyleProps = {
  $variant: 'primary' | 'secondary' | 'outline' | 'danger'
  $size: 'sm' | 'md' | 'lg'
  $fullWidth: boolean
}

const sizes = {
  sm: css`padding: 6px 12px; font-size: 0.875rem;`,
  md: css`padding: 10px 18px; font-size: 1rem;`,
  lg: css`padding: 14px 24px; font-size: 1.125rem;`
}

const variants = {
  primary: css`background: ${theme.colors.baseBlue.base}; color: #fff;`,
  secondary: css`background: ${theme.colors.secondaryColor}; color: #fff;`,
  outline: css`background: transparent; color: ${theme.colors.baseBlue.base}; border: 1px solid currentColor;`,
  danger: css`background: ${theme.colors.baseRed.base}; color: #fff;`
}

export const StyledButton = styled.button<StyleProps>`
  border: none;
  border-radius: 8px;
  cursor: pointer;
  transition: ${transitions.default};
  width: ${({ $fullWidth }) => ($fullWidth ? '100%' : 'auto')};
  ${({ $size }) => sizes[$size]}
  ${({ $variant }) => variants[$variant]}

  &:disabled {
    opacity: 0.6;
    cursor: not-allowed;
  }
`
"""


def render_tailwind_button(config: ProjectConfig) -> str:
    return """import { cva, type VariantProps } from 'class-variance-authority'
import clsx from 'clsx'
import React, { forwardRef } from 'react'

const buttonVariants = cva('rounded-lg transition-colors disabled:opacity-60 disabled:cursor-not-allowed', {
  variants: {
    variant: {
      primary: 'bg-blue-500 hover:bg-blue-600 text-white',
      secondary: 'bg-[#023864] hover:bg-[#011627] text-white',
      outline: 'border border-blue-500 text-blue-500 hover:bg-blue-500/10',
      danger: 'bg-red-600 hover:bg-red-700 text-white'
    },
    size: {
      sm: 'px-3 py-1.5 text-sm',
      md: 'px-5 py-2.5',
      lg: 'px-6 py-3.5 text-lg'
    },
    fullWidth: {
      true: 'w-full'
    }
  },
  defaultVariants: {
    variant: 'primary',
    size: 'md'
  }
})

export interface ButtonProps
  extends React.ButtonHTMLAttributes<HTMLButtonElement>,
    VariantProps<typeof buttonVariants> {
  loading?: boolean
}

export const Button = forwardRef<HTMLButtonElement, ButtonProps>(
  ({ variant, size, fullWidth, loading = false, disabled, className, children, type = 'button', ...props }, ref) => (
    <button
      ref={ref}
      type={type}
      className={clsx(buttonVariants({ variant, size, fullWidth }), className)}
      disabled={disabled || loading}
      aria-busy={loading}
      {...props}
    >
      {loading ? '...' : children}
    </button>
  )
)

Button.displayName = 'Button'
export default Button
"""


def render_styled_error_message(config: ProjectConfig) -> str:
    return """import { ErrorMessageContent } from './ErrorMessageStyles'

type Props = {
  message: string
}

export const ErrorMessage = ({ message }: Props) => (
  <ErrorMessageContent role="alert" className="container">
    {message}
  </ErrorMessageContent>
)
"""


def render_error_message_styles(config: ProjectConfig) -> str:
    return """import { theme } from '@/styles/theme'
import styled from 'styled-components'

export const ErrorMessageContent = styled.div`
  padding: 1rem;
  border-radius: 8px;
  margin: 1rem;
  text-align: center;
  font-weight: 500;
  color: ${theme.colors.baseBlue.light40};
  background-color: ${theme.colors.baseRed.dark08};
`
"""


def render_tailwind_error_message(config: ProjectConfig) -> str:
    return """type Props = {
  message: string
}

export const ErrorMessage = ({ message }: Props) => (
  <div role="alert" className="container m-4 p-4 rounded-lg text-center font-medium text-red-100 bg-red-800/80">
    {message}
  </div>
)
"""


def render_modal_wrapper(config: ProjectConfig) -> str:
    return """'use client'

import { AnimatePresence, motion } from 'framer-motion'
import { ReactNode } from 'react'

type ModalWrapperProps = {
  isOpen: boolean
  children: ReactNode
  onClose: () => void
}

export const ModalWrapper = ({ isOpen, children, onClose }: ModalWrapperProps) => (
  <AnimatePresence>
    {isOpen && (
      <motion.div
        key="modal"
        initial={{ opacity: 0, y: -30 }}
        animate={{ opacity: 1, y: 0 }}
        exit={{ opacity: 0, y: -30 }}
        transition={{ duration: 0.3, ease: 'easeInOut' }}
        style={{
          position: 'fixed',
          inset: 0,
          zIndex: 100,
          display: 'flex',
          alignItems: 'center',
          justifyContent: 'center',
          backgroundColor: 'rgba(0, 0, 0, 0.5)',
          backdropFilter: 'blur(5px)'
        }}
        onClick={onClose}
      >
        <div onClick={event => event.stopPropagation()}>{children}</div>
      </motion.div>
    )}
  </AnimatePresence>
)
"""


def render_masked_input(config: ProjectConfig) -> str:
    return """'use client'

import { useField } from 'formik'
import { IMaskInput } from 'react-imask'

type MaskedInputProps = {
  name: string
  label?: string
  mask: string
  placeholder?: string
}

export const MaskedInput = ({ name, label, mask, placeholder }: MaskedInputProps) => {
  const [field, meta, helpers] = useField<string>(name)

  return (
    <div className="masked-input">
      {label && <label htmlFor={name}>{label}</label>}
      <IMaskInput
        id={name}
        name={name}
        mask={mask}
        value={field.value ?? ''}
        placeholder={placeholder}
        onAccept={(value: string) => helpers.setValue(value)}
        onBlur={() => helpers.setTouched(true)}
      />
      {meta.touched && meta.error && <small role="alert">{meta.error}</small>}
    </div>
  )
}
"""


def render_typewriter(config: ProjectConfig) -> str:
    return """'use client'

import { useEffect, useState } from 'react'
import styled, { keyframes } from 'styled-components'

const blink = keyframes`
  0%, 50% { opacity: 1; }
  50.01%, 100% { opacity: 0; }
`

const Cursor = styled.span<{ $color: string }>`
  display: inline-block;
  width: 2px;
  height: 1em;
  margin-left: 2px;
  vertical-align: text-bottom;
  background: ${({ $color }) => $color};
  animation: ${blink} 1s infinite;
`

interface TypewriterProps {
  texts: string[]
  typingSpeed?: number
  erasingSpeed?: number
  delayBetween?: number
  color?: string
}

export default function Typewriter({ texts, typingSpeed = 100, erasingSpeed = 50, delayBetween = 2000, color = '#000' }: TypewriterProps) {
  const [index, setIndex] = useState(0)
  const [subIndex, setSubIndex] = useState(0)
  const [deleting, setDeleting] = useState(false)

  useEffect(() => {
    if (texts.length === 0) return

    if (!deleting && subIndex === texts[index].length) {
      const timeout = setTimeout(() => setDeleting(true), delayBetween)
      return () => clearTimeout(timeout)
    }

    if (deleting && subIndex === 0) {
      setDeleting(false)
      setIndex(prev => (prev + 1) % texts.length)
      return
    }

    const timeout = setTimeout(() => setSubIndex(prev => prev + (deleting ? -1 : 1)), deleting ? erasingSpeed : typingSpeed)
    return () => clearTimeout(timeout)
  }, [subIndex, index, deleting, texts, typingSpeed, erasingSpeed, delayBetween])

  return (
    <span style={{ color }}>
      {texts[index]?.substring(0, subIndex)}
      <Cursor $color={color} />
    </span>
  )
}
"""


def register_example_templates(catalog: TemplateCatalog) -> None:
    styled = all_of(with_examples, styled_components)
    plain = all_of(with_examples, tailwind)

    catalog.register(TemplateDescriptor("src/app/page.tsx", render_styled_home, when=styled))
    catalog.register(TemplateDescriptor("src/app/page.tsx", render_tailwind_home, when=plain))
    catalog.register(TemplateDescriptor("src/app/(public)/layout.tsx", render_public_layout, when=with_examples))
    catalog.register(TemplateDescriptor("src/app/(public)/loading.tsx", render_styled_loading, when=styled))
    catalog.register(TemplateDescriptor("src/app/(public)/loading.tsx", render_tailwind_loading, when=plain))
    catalog.register(TemplateDescriptor("src/app/(public)/not-found.tsx", render_styled_not_found, when=styled))
    catalog.register(TemplateDescriptor("src/app/(public)/not-found.tsx", render_tailwind_not_found, when=plain))
    catalog.register(TemplateDescriptor("src/app/(private)/layout.tsx", render_private_layout, when=with_examples))

    header = "src/components/layout/header/"
    footer = "src/components/layout/footer/"
    catalog.register(TemplateDescriptor(header + "Header.tsx", render_styled_header, when=styled))
    catalog.register(TemplateDescriptor(header + "HeaderStyles.ts", render_header_styles, when=styled))
    catalog.register(TemplateDescriptor(header + "Header.tsx", render_tailwind_header, when=plain))
    catalog.register(TemplateDescriptor(footer + "Footer.tsx", render_styled_footer, when=styled))
    catalog.register(TemplateDescriptor(footer + "FooterStyles.ts", render_footer_styles, when=styled))
    catalog.register(TemplateDescriptor(footer + "Footer.tsx", render_tailwind_footer, when=plain))

    ui = "src/components/ui/"
    catalog.register(TemplateDescriptor(ui + "Button/Button.tsx", render_styled_button, when=styled))
    catalog.register(TemplateDescriptor(ui + "Button/ButtonStyles.ts", render_button_styles, when=styled))
    catalog.register(TemplateDescriptor(ui + "Button/Button.tsx", render_tailwind_button, when=plain))
    catalog.register(TemplateDescriptor(
        ui + "ErrorMessage/ErrorMessage.tsx", render_styled_error_message, when=styled
    ))
    catalog.register(TemplateDescriptor(
        ui + "ErrorMessage/ErrorMessageStyles.ts", render_error_message_styles, when=styled
    ))
    catalog.register(TemplateDescriptor(
        ui + "ErrorMessage/ErrorMessage.tsx", render_tailwind_error_message, when=plain
    ))
    catalog.register(TemplateDescriptor(
        ui + "ModalWrapper/ModalWrapper.tsx", render_modal_wrapper, when=all_of(with_examples, with_extras)
    ))
    catalog.register(TemplateDescriptor(
        ui + "MaskedInput/MaskedInput.tsx", render_masked_input, when=all_of(with_examples, with_extras)
    ))
    catalog.register(TemplateDescriptor(
        ui + "TypeWriter/TypeWriter.tsx", render_typewriter, when=all_of(with_examples, styled_components)
    ))
