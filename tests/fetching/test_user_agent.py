# tests/fetching/test_user_agent.py
from unittest.mock import patch

from fetcher.services.generate_default_user_agent_service import generate_default_user_agent


@patch("fetcher.services.generate_default_user_agent_service.platform.system", return_value="Linux")
def test_user_agent_for_linux(_mock_system):
    user_agent = generate_default_user_agent()
    assert "X11; Linux x86_64" in user_agent
    assert user_agent.startswith("Mozilla/5.0 (")


@patch("fetcher.services.generate_default_user_agent_service.config_manager")
def test_user_agent_uses_configured_chrome_version(mock_config):
    mock_config.get_nested.return_value = "999.0.0.0"
    assert "Chrome/999.0.0.0 Safari/537.36" in generate_default_user_agent()
    mock_config.get_nested.assert_called_once_with("user_agent.chrome_version", "120.0.0.0")
