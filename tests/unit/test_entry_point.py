from unittest.mock import patch


def test_main_invokes_cli() -> None:
    """Verify main() hands control to the click group."""
    with patch("gh_tagging.cli") as mock_cli:
        from gh_tagging import main

        main()

    mock_cli.assert_called_once_with()
