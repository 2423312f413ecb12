"""Redux store, providers, theme and shared utilities."""

from rnt_next.config import ProjectConfig
from rnt_next.templates import (
    TemplateCatalog,
    TemplateDescriptor,
    all_of,
    negate,
    with_backend,
    with_tests,
)


def render_color_utils(config: ProjectConfig) -> str:
    return """// HSL color variants used by the theme

export type ColorVariants = {
  base: string
  light: string
  light20: string
  light30: string
  light40: string
  dark: string
  dark08: string
  dark20: string
  dark30: string
  dark50: string
}

const clamp = (value: number) => Math.min(100, Math.max(0, value))

export function colorHSLVariants(h: number, s: number, l: number): ColorVariants {
  return {
    base: `hsl(${h}, ${s}%, ${clamp(l)}%)`,
    light: `hsl(${h}, ${s}%, ${clamp(l + 10)}%)`,
    light20: `hsl(${h}, ${s}%, ${clamp(l + 20)}%)`,
    light30: `hsl(${h}, ${s}%, ${clamp(l + 30)}%)`,
    light40: `hsl(${h}, ${s}%, ${clamp(l + 40)}%)`,
    dark: `hsl(${h}, ${s}%, ${clamp(l - 10)}%)`,
    dark08: `hsla(${h}, ${s}%, ${clamp(l - 6)}%, 0.8)`,
    dark20: `hsl(${h}, ${s}%, ${clamp(l - 20)}%)`,
    dark30: `hsl(${h}, ${s}%, ${clamp(l - 30)}%)`,
    dark50: `hsl(${h}, ${s}%, ${clamp(l - 50)}%)`
  }
}
"""


def render_theme(config: ProjectConfig) -> str:
    return """// Colors, breakpoints and transitions shared by every component

import { colorHSLVariants } from '@/utils/colorUtils'

export const media = {
  pc: '@media (max-width: 1024px)',
  tablet: '@media (max-width: 768px)',
  mobile: '@media (max-width: 480px)'
}

export const transitions = {
  default: 'all 0.2s ease'
}

export const baseBlack = colorHSLVariants(210, 20, 12)
export const baseBlue = colorHSLVariants(220, 80, 50)
export const baseGreen = colorHSLVariants(100, 100, 50)
export const baseRed = colorHSLVariants(0, 100, 50)
export const baseCyan = colorHSLVariants(180, 100, 50)

export const theme = {
  colors: {
    baseBlack,
    baseBlue,
    baseGreen,
    baseRed,
    baseCyan,
    primaryColor: '#011627',
    secondaryColor: '#023864',
    thirdColor: '#0d6efd',
    textColor: '#fff',
    blue: '#0000FF',
    blue2: '#1E90FF',
    gray: '#666666',
    gray2: '#a1a1a1',
    error: '#AB2E46'
  }
}
"""


def render_use_app_dispatch(config: ProjectConfig) -> str:
    return """import { AppDispatch, RootState } from '@/redux/store'
import { TypedUseSelectorHook, useDispatch, useSelector } from 'react-redux'

export const useAppDispatch = () => useDispatch<AppDispatch>()
export const useAppSelector: TypedUseSelectorHook<RootState> = useSelector
"""


def render_providers(config: ProjectConfig) -> str:
    if config.uses_styled_components:
        return """'use client'

import { store } from '@/redux/store'
import { theme } from '@/styles/theme'
import { ReactNode } from 'react'
import { Provider } from 'react-redux'
import { ThemeProvider } from 'styled-components'

export function Providers({ children }: { children: ReactNode }) {
  return (
    <Provider store={store}>
      <ThemeProvider theme={theme}>{children}</ThemeProvider>
    </Provider>
  )
}
"""
    return """'use client'

import { store } from '@/redux/store'
import { ReactNode } from 'react'
import { Provider } from 'react-redux'

export function Providers({ children }: { children: ReactNode }) {
  return <Provider store={store}>{children}</Provider>
}
"""


_STORE_TYPES = """
export type RootState = ReturnType<typeof store.getState>
export type AppDispatch = typeof store.dispatch
"""


def render_store(config: ProjectConfig) -> str:
    if config.install_backend:
        body = """import { configureStore } from '@reduxjs/toolkit'
import { apiSlice } from './slices/apiSlice'

export const store = configureStore({
  reducer: {
    [apiSlice.reducerPath]: apiSlice.reducer
  },
  middleware: getDefaultMiddleware => getDefaultMiddleware().concat(apiSlice.middleware)
})
"""
    elif config.install_tests:
        body = """import { configureStore } from '@reduxjs/toolkit'
import authReducer from './slices/authSlice'

export const store = configureStore({
  reducer: {
    auth: authReducer
  }
})
"""
    else:
        body = """import { configureStore } from '@reduxjs/toolkit'

export const store = configureStore({
  reducer: {
    // add your reducers here
  }
})
"""
    return body + _STORE_TYPES


def render_auth_slice(config: ProjectConfig) -> str:
    return """import { createSlice, PayloadAction } from '@reduxjs/toolkit'

type User = {
  id: string
  name: string
  email: string
}

interface AuthState {
  user: User | null
  isAuthenticated: boolean
  loading: boolean
}

const initialState: AuthState = {
  user: null,
  isAuthenticated: false,
  loading: false
}

const authSlice = createSlice({
  name: 'auth',
  initialState,
  reducers: {
    loginStart: state => {
      state.loading = true
    },
    loginSuccess: (state, action: PayloadAction<User>) => {
      state.loading = false
      state.isAuthenticated = true
      state.user = action.payload
    },
    loginFailure: state => {
      state.loading = false
      state.isAuthenticated = false
      state.user = null
    },
    logout: state => {
      state.isAuthenticated = false
      state.user = null
      state.loading = false
    }
  }
})

export const { loginStart, loginSuccess, loginFailure, logout } = authSlice.actions
export default authSlice.reducer
"""


def render_api_slice(config: ProjectConfig) -> str:
    return """import { createApi, fetchBaseQuery } from '@reduxjs/toolkit/query/react'

type User = {
  id: string
  name: string
  email: string
  role: 'ADMIN' | 'USER'
}

export const apiSlice = createApi({
  reducerPath: 'api',
  baseQuery: fetchBaseQuery({ baseUrl: '/api', credentials: 'include' }),
  tagTypes: ['User'],
  endpoints: builder => ({
    verify: builder.query<User, void>({
      query: () => 'auth/verify',
      providesTags: ['User']
    }),
    login: builder.mutation<{ success: boolean; message: string }, { email: string; password: string }>({
      query: body => ({ url: 'auth/login', method: 'POST', body }),
      invalidatesTags: ['User']
    }),
    register: builder.mutation<{ success: boolean; message: string }, { name: string; email: string; password: string }>({
      query: body => ({ url: 'auth/register', method: 'POST', body })
    }),
    logout: builder.mutation<{ success: boolean }, void>({
      query: () => ({ url: 'auth/logout', method: 'POST' }),
      invalidatesTags: ['User']
    }),
    getUsers: builder.query<User[], void>({
      query: () => 'users',
      providesTags: ['User']
    })
  })
})

export const { useVerifyQuery, useLoginMutation, useRegisterMutation, useLogoutMutation, useGetUsersQuery } = apiSlice
"""


def register_state_templates(catalog: TemplateCatalog) -> None:
    catalog.register(TemplateDescriptor("src/utils/colorUtils.ts", render_color_utils))
    catalog.register(TemplateDescriptor("src/styles/theme.ts", render_theme))
    catalog.register(TemplateDescriptor("src/hooks/useAppDispatch.ts", render_use_app_dispatch))
    catalog.register(TemplateDescriptor("src/components/providers.tsx", render_providers))
    catalog.register(TemplateDescriptor("src/redux/store.ts", render_store))
    catalog.register(TemplateDescriptor(
        "src/redux/slices/authSlice.ts",
        render_auth_slice,
        when=all_of(with_tests, negate(with_backend)),
    ))
    catalog.register(TemplateDescriptor(
        "src/redux/slices/apiSlice.ts",
        render_api_slice,
        when=with_backend,
    ))
