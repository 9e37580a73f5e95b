"""
Tests for page builders, with NiceGUI's ``ui`` replaced by a mock.
"""

from unittest.mock import call, patch

from servers import ServerRegistry


def _registry():
    return ServerRegistry({}, simulate_status=False)


class TestActionsPage:

    def test_offers_only_selectable_servers(self):
        from ui.actions_page import actions_page

        with patch("ui.actions_page.ui") as mock_ui:
            actions_page(_registry())
        options = mock_ui.select.call_args.kwargs["options"]
        assert "192.168.1.100" not in options
        assert options["192.168.1.10"] == "DC-PRIMARY (192.168.1.10)"

    def test_resize_card_is_disabled_placeholder(self):
        from ui.actions_page import actions_page

        with patch("ui.actions_page.ui") as mock_ui:
            actions_page(_registry())
        assert call("Run Resize (Not Implemented)", icon="storage") in mock_ui.button.call_args_list
        labels = [c.args[0] for c in mock_ui.label.call_args_list if c.args]
        assert "Resize Disks" in labels
        mock_ui.button.return_value.disable.assert_called()


class TestHeader:

    def test_links_and_no_channel_chip(self):
        from ui.navigation import build_header

        with patch("ui.navigation.ui") as mock_ui:
            build_header()
        targets = [c.args[1] for c in mock_ui.link.call_args_list]
        assert targets == ["/", "/servers", "/actions"]
        mock_ui.chip.assert_not_called()
