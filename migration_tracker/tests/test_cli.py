"""End-to-end tests for the command-line interface."""
import csv
import json

import pytest
from click.testing import CliRunner

from ..cli import main as cli_main
from .conftest import create_test_csv

SERVER_FIELDS = ['Customer', 'VM Name', 'Host', 'Cores', 'Storage Used (GiB)']

@pytest.fixture
def runner(clean_env, tmp_path):
    """CliRunner against a fresh SQLite file with the schema created."""
    clean_env.setenv('DATABASE_URL', f"sqlite:///{tmp_path / 'tracker.db'}")
    # Handlers bound to CliRunner's captured streams would outlive the test
    clean_env.setattr(cli_main, 'setup_logging', lambda **kwargs: None)
    runner = CliRunner()
    result = runner.invoke(cli_main.cli, ['init-db'])
    assert result.exit_code == 0, result.output
    return runner

def test_import_servers(runner, tmp_path):
    csv_path = create_test_csv(tmp_path, 'servers.csv', SERVER_FIELDS, [
        {'Customer': 'Acme Corp', 'VM Name': 'acme-web01', 'Host': 'esx-01', 'Cores': '4', 'Storage Used (GiB)': '80'},
        {'Customer': 'Acme Corp', 'VM Name': 'acme-db01', 'Host': 'esx-02', 'Cores': '8', 'Storage Used (GiB)': '500'},
        {'Customer': 'Beta LLC', 'VM Name': 'beta-app01', 'Host': 'esx-01', 'Cores': '2', 'Storage Used (GiB)': ''},
    ])
    output = tmp_path / 'result.json'

    result = runner.invoke(cli_main.cli, ['import', 'servers', str(csv_path), '--output', str(output)])

    assert result.exit_code == 0, result.output
    assert 'Rows Imported: 3' in result.output
    assert 'Customers Created: 2' in result.output

    summary = json.loads(output.read_text())
    assert summary['entity'] == 'servers'
    assert summary['customers'] == {'Acme Corp': 1, 'Beta LLC': 2}

    result = runner.invoke(cli_main.cli, ['customers', 'list'])
    assert result.exit_code == 0, result.output
    assert '[1] Acme Corp' in result.output
    assert '[2] Beta LLC' in result.output

def test_import_blank_customers_uses_unknown(runner, tmp_path):
    csv_path = create_test_csv(tmp_path, 'colo.csv', ['Customer Name', 'Rack Location'], [
        {'Customer Name': '', 'Rack Location': 'R1'},
        {'Customer Name': 'Gamma Inc', 'Rack Location': 'R2'},
    ])

    result = runner.invoke(cli_main.cli, ['import', 'colo-customers', str(csv_path)])

    assert result.exit_code == 0, result.output
    assert "Rows Assigned to 'Unknown': 1" in result.output

def test_failed_import_reports_one_error(runner, tmp_path):
    csv_path = create_test_csv(tmp_path, 'voice.csv', ['VM Name', 'System Type'], [
        {'VM Name': 'pbx-01', 'System Type': 'FreePBX'},
    ])

    result = runner.invoke(cli_main.cli, ['import', 'voice-systems', str(csv_path)])

    assert result.exit_code != 0
    assert 'voice systems import failed: Missing required column' in result.output

    result = runner.invoke(cli_main.cli, ['customers', 'list'])
    assert 'No customers found in database' in result.output

def test_resolve_dry_run_saves_nothing(runner):
    result = runner.invoke(cli_main.cli, ['customers', 'resolve', '--dry-run', 'Acme Corporation', 'Acme Corporaton', ''])

    assert result.exit_code == 0, result.output
    assert "'Acme Corporation' -> 1 (created)" in result.output
    assert "'Acme Corporaton' -> 1 (fuzzy to 'Acme Corporation', score 0.06" in result.output
    assert "'' -> 2 (unknown)" in result.output

    result = runner.invoke(cli_main.cli, ['customers', 'list'])
    assert 'No customers found in database' in result.output

def test_resolve_and_ensure_unknown(runner):
    result = runner.invoke(cli_main.cli, ['customers', 'resolve', 'Acme Corp'])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli_main.cli, ['customers', 'resolve', 'ACME CORP'])
    assert "'ACME CORP' -> 1 (exact)" in result.output

    result = runner.invoke(cli_main.cli, ['customers', 'ensure-unknown'])
    assert "'Unknown' customer id: 2" in result.output
    result = runner.invoke(cli_main.cli, ['customers', 'ensure-unknown'])
    assert "'Unknown' customer id: 2" in result.output

def test_json_output_format(runner, clean_env):
    clean_env.setenv('OUTPUT_FORMAT', 'json')
    runner.invoke(cli_main.cli, ['customers', 'resolve', 'Acme Corp'])

    result = runner.invoke(cli_main.cli, ['customers', 'list'])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output[result.output.index('{'):])
    assert payload['total'] == 1
    assert payload['customers'][0]['name'] == 'Acme Corp'

def test_test_connection(runner):
    result = runner.invoke(cli_main.cli, ['test-connection'])
    assert result.exit_code == 0, result.output
    assert 'Successfully connected' in result.output

def test_missing_database_url(clean_env):
    clean_env.setattr(cli_main, 'setup_logging', lambda **kwargs: None)
    result = CliRunner().invoke(cli_main.cli, ['test-connection'])

    assert result.exit_code == 1
    assert 'DATABASE_URL' in result.output

def test_import_keeps_na_like_customer_names(runner, tmp_path):
    csv_path = create_test_csv(tmp_path, 'servers.csv', ['Customer', 'VM Name'], [
        {'Customer': 'NA', 'VM Name': 'na-web01'},
        {'Customer': 'None', 'VM Name': 'none-web01'},
        {'Customer': '', 'VM Name': 'orphan-01'},
    ])

    result = runner.invoke(cli_main.cli, ['import', 'servers', str(csv_path)])

    assert result.exit_code == 0, result.output
    assert 'Customers Created: 3' in result.output
    assert "Rows Assigned to 'Unknown': 1" in result.output

    result = runner.invoke(cli_main.cli, ['customers', 'list'])
    assert '[1] NA' in result.output
    assert '[2] None' in result.output
    assert '[3] Unknown' in result.output

def test_export_then_reimport(runner, tmp_path):
    csv_path = create_test_csv(tmp_path, 'servers.csv', SERVER_FIELDS, [
        {'Customer': 'Acme Corp', 'VM Name': 'acme-web01', 'Host': 'esx-01', 'Cores': '4', 'Storage Used (GiB)': '80'},
        {'Customer': 'Beta LLC', 'VM Name': 'beta-app01', 'Host': 'esx-01', 'Cores': '2', 'Storage Used (GiB)': ''},
    ])
    runner.invoke(cli_main.cli, ['import', 'servers', str(csv_path)])
    export_path = tmp_path / 'servers-export.csv'

    result = runner.invoke(cli_main.cli, ['export', 'servers', '--output', str(export_path)])

    assert result.exit_code == 0, result.output
    assert 'Exported 2 servers rows' in result.output
    with open(export_path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert [row['VM Name'] for row in rows] == ['acme-web01', 'beta-app01']
    assert [row['Customer ID'] for row in rows] == ['1', '2']

    result = runner.invoke(cli_main.cli, ['import', 'servers', str(export_path)])
    assert result.exit_code == 0, result.output
    assert 'Customers Created: 0' in result.output
    assert 'Exact Matches: 2' in result.output

    result = runner.invoke(cli_main.cli, ['export', 'servers'])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith('Customer,VM Name,Host')
    assert len(lines) == 5

def test_resolve_reports_outcome_per_raw_name(runner):
    result = runner.invoke(cli_main.cli, ['customers', 'resolve', 'Acme', ' Acme '])

    assert result.exit_code == 0, result.output
    assert "'Acme' -> 1 (created)" in result.output
    assert "' Acme ' -> 1 (exact)" in result.output
