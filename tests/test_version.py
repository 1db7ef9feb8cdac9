from click.testing import CliRunner


def test_version_attribute() -> None:
    import pdfdoc_password

    assert isinstance(pdfdoc_password.__version__, str)
    assert pdfdoc_password.__version__


def test_cli_reports_version() -> None:
    from pdfdoc_password.cli import _package_version, cli

    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "pdfdoc-password" in result.output
    assert _package_version() in result.output

    command_result = runner.invoke(cli, ["version"])

    assert command_result.exit_code == 0
    assert "pdfdoc-password" in command_result.output
    assert _package_version() in command_result.output
