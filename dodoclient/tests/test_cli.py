"""Tests for the dodoclient command line."""

from unittest.mock import patch

from rich.console import Console
from typer.testing import CliRunner

from dodoclient import ClientSettings, __version__
from dodoclient.cli import app

from .fixtures import PAYMENT_LIST_ITEM, WEBHOOK_DETAILS, Recorder, make_client

runner = CliRunner()


def run_with(recorder: Recorder, args: list[str]):
    # wide console so table cells are not wrapped
    with (
        patch('dodoclient.cli._make_client', return_value=make_client(recorder)),
        patch('dodoclient.cli.console', Console(width=200)),
    ):
        return runner.invoke(app, args)


class TestPaymentsCommand:
    """Tests for `dodoclient payments`."""

    def test_lists_payments(self):
        """Test that one page of payments is printed as a table."""
        recorder = Recorder((200, {'items': [PAYMENT_LIST_ITEM]}))

        result = run_with(recorder, ['payments', '--page-size', '1'])

        assert result.exit_code == 0
        assert 'pay_1' in result.stdout
        assert 'succeeded' in result.stdout
        assert '--page-number 1' in result.stdout
        assert recorder.last.url.params['page_size'] == '1'

    def test_status_filter(self):
        """Test that --status is sent as a query parameter."""
        recorder = Recorder((200, {'items': []}))

        result = run_with(recorder, ['payments', '--status', 'failed'])

        assert result.exit_code == 0
        assert dict(recorder.last.url.params) == {'status': 'failed'}
        assert 'More results' not in result.stdout

    def test_api_error_exits_with_1(self):
        """Test that API failures are reported without a traceback."""
        recorder = Recorder((401, {'message': 'invalid key'}))

        result = run_with(recorder, ['payments'])

        assert result.exit_code == 1
        assert 'Error:' in result.stdout
        assert 'invalid key' in result.stdout


class TestOtherCommands:
    """Tests for the remaining commands."""

    def test_webhooks_follows_cursor(self):
        """Test that every endpoint across cursor pages is listed."""
        recorder = Recorder(
            (200, {'data': [WEBHOOK_DETAILS], 'done': True, 'iterator': 'it_2'}),
            (200, {'data': [{**WEBHOOK_DETAILS, 'id': 'wh_2'}], 'done': True}),
        )

        result = run_with(recorder, ['webhooks'])

        assert result.exit_code == 0
        assert 'wh_1' in result.stdout
        assert 'wh_2' in result.stdout
        assert len(recorder.requests) == 2

    def test_invoice_is_saved(self, tmp_path):
        """Test that the invoice PDF is written to the output path."""
        recorder = Recorder((200, b'%PDF-1.7'), headers={'content-type': 'application/pdf'})
        output = tmp_path / 'invoice.pdf'

        result = run_with(recorder, ['invoice', 'pay_1', '--output', str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == b'%PDF-1.7'
        assert 'Saved' in result.stdout

    def test_invoice_not_found(self, tmp_path):
        """Test that no file is written when the download fails."""
        recorder = Recorder((404, {'message': 'no such payment'}))
        output = tmp_path / 'invoice.pdf'

        result = run_with(recorder, ['invoice', 'pay_x', '-o', str(output)])

        assert result.exit_code == 1
        assert not output.exists()

    def test_countries(self):
        """Test that supported countries are printed."""
        recorder = Recorder((200, ['US', 'DE']))

        result = run_with(recorder, ['countries'])

        assert result.exit_code == 0
        assert 'US DE' in result.stdout

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ['version'])

        assert result.exit_code == 0
        assert f'dodoclient version: {__version__}' in result.stdout

    @patch('dodoclient.cli.get_settings')
    @patch('dodoclient.cli.DodoPayments')
    def test_config_option_is_loaded(self, mock_client_class, mock_get_settings):
        """Test that --config is passed on to settings loading."""
        settings = ClientSettings(api_key='sk_file')
        mock_get_settings.return_value = settings
        mock_client_class.return_value = make_client(Recorder((200, ['US'])))

        result = runner.invoke(app, ['countries', '-c', 'dodo.yaml'])

        assert result.exit_code == 0
        mock_get_settings.assert_called_once_with('dodo.yaml')
        mock_client_class.assert_called_once_with(settings=settings)
