"""Jest configuration and example tests."""

from rnt_next.config import ProjectConfig
from rnt_next.templates import (
    TemplateCatalog,
    TemplateDescriptor,
    all_of,
    negate,
    with_backend,
    with_examples,
    with_tests,
)


def render_jest_config(config: ProjectConfig) -> str:
    return """const nextJest = require('next/jest')

// Loads next.config and .env files from the project root
const createJestConfig = nextJest({
  dir: './'
})

const customJestConfig = {
  setupFilesAfterEnv: ['<rootDir>/jest.setup.js'],
  moduleNameMapper: {
    '^@/(.*)$': '<rootDir>/src/$1'
  },
  testEnvironment: 'jest-environment-jsdom'
}

module.exports = createJestConfig(customJestConfig)
"""


def render_jest_setup(config: ProjectConfig) -> str:
    return "import '@testing-library/jest-dom'\n"


def render_color_utils_test(config: ProjectConfig) -> str:
    return """import { colorHSLVariants } from '@/utils/colorUtils'

describe('colorHSLVariants', () => {
  it('keeps the base color unchanged', () => {
    expect(colorHSLVariants(220, 80, 50).base).toBe('hsl(220, 80%, 50%)')
  })

  it('clamps lightness between 0 and 100', () => {
    const variants = colorHSLVariants(0, 100, 95)
    expect(variants.light20).toBe('hsl(0, 100%, 100%)')
    expect(colorHSLVariants(0, 100, 5).dark20).toBe('hsl(0, 100%, 0%)')
  })
})
"""


def render_page_test(config: ProjectConfig) -> str:
    return """import Home from '@/app/page'
import { render, screen } from '@testing-library/react'

describe('Home page', () => {
  it('renders the project name', () => {
    render(<Home />)
    expect(screen.getByText('""" + config.directory_name + """')).toBeInTheDocument()
  })
})
"""


def render_auth_slice_test(config: ProjectConfig) -> str:
    return """import authReducer, { loginStart, loginSuccess, logout } from '@/redux/slices/authSlice'

const user = { id: '1', name: 'Test User', email: 'test@example.com' }

describe('authSlice', () => {
  it('starts logged out', () => {
    const state = authReducer(undefined, { type: 'unknown' })
    expect(state.isAuthenticated).toBe(false)
    expect(state.user).toBeNull()
  })

  it('flags loading while logging in', () => {
    const state = authReducer(undefined, loginStart())
    expect(state.loading).toBe(true)
  })

  it('stores the user on success and clears it on logout', () => {
    const loggedIn = authReducer(undefined, loginSuccess(user))
    expect(loggedIn.user).toEqual(user)
    expect(authReducer(loggedIn, logout()).isAuthenticated).toBe(false)
  })
})
"""


def register_testing_templates(catalog: TemplateCatalog) -> None:
    catalog.register(TemplateDescriptor("jest.config.js", render_jest_config, when=with_tests))
    catalog.register(TemplateDescriptor("jest.setup.js", render_jest_setup, when=with_tests))
    catalog.register(TemplateDescriptor("__tests__/colorUtils.test.ts", render_color_utils_test, when=with_tests))
    catalog.register(TemplateDescriptor(
        "__tests__/page.test.tsx", render_page_test, when=all_of(with_tests, with_examples)
    ))
    catalog.register(TemplateDescriptor(
        "src/__tests__/authSlice.test.ts", render_auth_slice_test, when=all_of(with_tests, negate(with_backend))
    ))
