"""Tests for actual CLI command."""

import json
from datetime import datetime, timezone
from unittest.mock import patch
import pytest
from click.testing import CliRunner
from planimpact.cli.main import cli
from planimpact.footprint import ImpactDataResponse, ProductCategory, ServiceCategory
from planimpact.utils.errors import FootprintError

QUERY_IMPACT_DATA = "planimpact.footprint.client.FootprintClient.query_impact_data"

pytestmark = pytest.mark.usefixtures("cli_env")


class TestActualCommand:
    """Test measured footprint queries from the CLI."""
    
    def test_table_output(self, scw_credentials, sample_impact_payload):
        """Test the organization defaults to SCW_ORGANIZATION_ID."""
        result_data = ImpactDataResponse.model_validate(sample_impact_payload)
        
        with patch(QUERY_IMPACT_DATA, return_value=result_data) as mock_query:
            runner = CliRunner()
            result = runner.invoke(cli, ['actual', '--quiet'])
        
        assert result.exit_code == 0
        assert "Total kgCO2e/month: 12.500000" in result.output
        assert "Project proj-1: kgCO2e=12.500000 m3=0.250000" in result.output
        query = mock_query.call_args[0][0]
        assert query.organization_id == "org-1"
        assert query.start_date is None
    
    def test_filters_reach_query(self, scw_credentials):
        """Test dates, list filters and categories."""
        with patch(QUERY_IMPACT_DATA, return_value=ImpactDataResponse()) as mock_query:
            runner = CliRunner()
            result = runner.invoke(cli, [
                'actual',
                '--org', 'org-override',
                '--start', '2026-09-01',
                '--end', '2026-10-01T00:00:00Z',
                '--project', 'p1,p2',
                '--project', 'p3',
                '--region', 'fr-par',
                '--zone', 'fr-par-1, fr-par-2',
                '--service-category', 'compute',
                '--product-category', 'instances,block-storage',
                '--quiet'
            ])
        
        assert result.exit_code == 0
        query = mock_query.call_args[0][0]
        assert query.organization_id == "org-override"
        assert query.start_date == datetime(2026, 9, 1, tzinfo=timezone.utc)
        assert query.end_date == datetime(2026, 10, 1, tzinfo=timezone.utc)
        assert query.project_ids == ["p1", "p2", "p3"]
        assert query.regions == ["fr-par"]
        assert query.zones == ["fr-par-1", "fr-par-2"]
        assert query.service_categories == [ServiceCategory.COMPUTE]
        assert query.product_categories == [ProductCategory.INSTANCES, ProductCategory.BLOCK_STORAGE]
    
    def test_json_to_file(self, scw_credentials, sample_impact_payload, tmp_path):
        result_data = ImpactDataResponse.model_validate(sample_impact_payload)
        output_file = tmp_path / "actual.json"
        
        with patch(QUERY_IMPACT_DATA, return_value=result_data):
            runner = CliRunner()
            result = runner.invoke(cli, ['actual', '--format', 'json', '-o', str(output_file), '--quiet'])
        
        assert result.exit_code == 0
        data = json.loads(output_file.read_text())
        assert data["projects"][0]["project_id"] == "proj-1"
    
    def test_missing_organization(self):
        runner = CliRunner()
        result = runner.invoke(cli, ['actual'])
        
        assert result.exit_code == 1
        assert "could not resolve organization id" in result.output
        assert "SCW_ORGANIZATION_ID" in result.output
    
    def test_missing_keys(self):
        """Test an explicit org without access and secret keys."""
        runner = CliRunner()
        result = runner.invoke(cli, ['actual', '--org', 'org-1'])
        
        assert result.exit_code == 1
        assert "access key is empty" in result.output
    
    def test_invalid_date(self, scw_credentials):
        with patch(QUERY_IMPACT_DATA) as mock_query:
            runner = CliRunner()
            result = runner.invoke(cli, ['actual', '--start', 'last week'])
        
        assert result.exit_code == 1
        assert "use YYYY-MM-DD or RFC3339" in result.output
        mock_query.assert_not_called()
    
    def test_start_after_end(self, scw_credentials):
        runner = CliRunner()
        result = runner.invoke(cli, ['actual', '--start', '2026-10-01', '--end', '2026-09-01'])
        
        assert result.exit_code == 1
        assert "--start must not be after --end" in result.output
    
    def test_invalid_category(self, scw_credentials):
        runner = CliRunner()
        result = runner.invoke(cli, ['actual', '--service-category', 'gpu'])
        
        assert result.exit_code == 1
        assert "--service-category value 'gpu'" in result.output
    
    def test_api_error(self, scw_credentials):
        with patch(QUERY_IMPACT_DATA, side_effect=FootprintError("Could not query impact data: 401")):
            runner = CliRunner()
            result = runner.invoke(cli, ['actual', '--quiet'])
        
        assert result.exit_code == 1
        assert "Error: Could not query impact data: 401" in result.output
