"""Pytest configuration and fixtures."""

import os
import pytest

from genui_eval.core import get_settings


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['GENUI_LOG_LEVEL'] = 'DEBUG'
    os.environ['GENUI_REPAIR_JSON'] = 'true'
    os.environ['GENUI_RUNS_PER_PROMPT'] = '1'
    os.environ['GENUI_MAX_CONCURRENCY'] = '0'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Message Fixtures
# ============================================================================

def component(component_id, component_type, **props):
    """Build a component dict."""
    return {"id": component_id, "componentProperties": {component_type: props}}


@pytest.fixture
def login_form():
    """Valid ComponentUpdate for a login form."""
    return {
        "components": [
            component("root", "Column", children={"explicitList": ["title", "user", "pass", "remember", "submit"]}),
            component("title", "Heading", text="Login"),
            component("user", "TextField", label="Username", text={"path": "/login/username"}),
            component("pass", "TextField", label="Password", text={"path": "/login/password"}),
            component("remember", "CheckBox", label="Remember Me", value={"path": "/login/rememberMe"}),
            component(
                "submit",
                "Button",
                label="Sign In",
                action={"action": "login", "dynamicContext": [{"key": "username", "value": {"path": "/login/username"}}]},
            ),
        ]
    }


@pytest.fixture
def settings_page():
    """Valid ComponentUpdate with tabs, a modal and a templated list."""
    return {
        "components": [
            component(
                "tabs",
                "Tabs",
                tabItems=[
                    {"title": "Profile", "child": "profile"},
                    {"title": "Notifications", "child": "notifications"},
                ],
            ),
            component("profile", "Column", children={"explicitList": ["name"]}),
            component("name", "TextField", label="Your name"),
            component("notifications", "CheckBox", label="Enable email notifications", value=False),
            component("delete", "Modal", entryPointChild="open-delete", contentChild="confirm"),
            component("open-delete", "Button", label="Delete Account", action="openModal"),
            component("confirm", "List", children={"template": {"componentId": "confirm-item", "dataBinding": "/items"}}),
            component("confirm-item", "Text", text={"path": "/items/label"}),
            component("rule", "Divider"),
        ]
    }


@pytest.fixture
def sample_prompt():
    """Small component-update prompt."""
    from genui_eval.eval import EvalPrompt
    from genui_eval.schema import ContentMatcher, MessageKind

    return EvalPrompt(
        name="loginForm",
        description="Login form",
        kind=MessageKind.COMPONENT_UPDATE,
        prompt_text="Generate a login form.",
        matchers=(ContentMatcher("Button", "label", "Sign In"),),
    )
