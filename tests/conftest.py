"""Shared fixtures: product and change factories, sample plan, catalog and report."""

from pathlib import Path
import pytest
from planimpact.catalog.models import CatalogProduct
from planimpact.contracts.report import Report, Row, Totals, UnsupportedResource
from planimpact.ingest.models import ResourceChange

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def build_product(sku, kg=None, m3=None, unit="hour", size=1, zone="", region="",
                  is_global=None, category="", product="", variant="", description="",
                  with_estimation=True):
    data = {
        "sku": sku,
        "product_category": category,
        "product": product,
        "variant": variant,
        "description": description,
        "locality": {"global": is_global, "region": region, "zone": zone},
        "unit_of_measure": {"unit": unit, "size": size},
    }
    if with_estimation:
        data["environmental_impact_estimation"] = {"kg_co2_equivalent": kg, "m3_water_usage": m3}
    return CatalogProduct.model_validate(data)


def build_change(resource_type, address=None, actions=("create",), before=None, after=None,
                 zone="", region=""):
    return ResourceChange(
        address=address or f"{resource_type}.test",
        type=resource_type,
        actions=list(actions),
        before=before or {},
        after=after or {},
        zone=zone,
        region=region
    )


@pytest.fixture
def make_product():
    """Factory for catalog products."""
    return build_product


@pytest.fixture
def make_change():
    """Factory for resource changes."""
    return build_change


@pytest.fixture
def sample_plan_path():
    """Plan with an instance, a volume, a deleted load balancer and a bucket."""
    return FIXTURES_DIR / "plan.sample.json"


@pytest.fixture
def sample_catalog_path():
    """Catalog snapshot covering the sample plan."""
    return FIXTURES_DIR / "catalog.sample.json"


@pytest.fixture
def sample_report():
    """Report with one fully known row, one partially known row and one unsupported resource."""
    return Report(
        rows=[
            Row(
                address="scaleway_instance_server.web",
                type="scaleway_instance_server",
                action="create",
                sku="/compute/dev1_s/run_fr-par-1",
                kgco2e_month=0.73,
                kgco2e_known=True,
                m3_water_month=0.146,
                m3_water_known=True
            ),
            Row(
                address="scaleway_block_volume.data",
                type="scaleway_block_volume",
                action="create",
                sku="/storage/block/sbs_5k/fr-par-1",
                kgco2e_month=5.0,
                kgco2e_known=True,
                m3_water_month=None,
                m3_water_known=False
            ),
        ],
        unsupported=[
            UnsupportedResource(
                address="scaleway_object_bucket.assets",
                code="not_implemented",
                reason="not implemented"
            )
        ],
        totals=Totals(
            kgco2e_month=5.73,
            kgco2e_known=True,
            m3_water_month=0.146,
            m3_water_known=False,
            unknown_rows=1
        )
    )


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Keep user/project config files and SCW_* credentials out of CLI runs."""
    from planimpact.config.credentials import ENV_ACCESS_KEY, ENV_ORGANIZATION_ID, ENV_SECRET_KEY
    from planimpact.config.manager import ENV_API_BASE_URL
    
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in (ENV_API_BASE_URL, ENV_ACCESS_KEY, ENV_SECRET_KEY, ENV_ORGANIZATION_ID):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def scw_credentials(monkeypatch):
    """Complete SCW_* credentials in the environment."""
    monkeypatch.setenv("SCW_ACCESS_KEY", "SCWACCESSKEY0000000")
    monkeypatch.setenv("SCW_SECRET_KEY", "11111111-2222-3333-4444-555555555555")
    monkeypatch.setenv("SCW_ORGANIZATION_ID", "org-1")


@pytest.fixture
def sample_impact_payload():
    """Footprint API response with one project, region, zone and SKU."""
    return {
        "start_date": "2026-09-01T00:00:00Z",
        "end_date": "2026-10-01T00:00:00Z",
        "total_impact": {"kg_co2_equivalent": 12.5, "m3_water_usage": 0.25},
        "projects": [{
            "project_id": "proj-1",
            "total_project_impact": {"kg_co2_equivalent": 12.5, "m3_water_usage": 0.25},
            "regions": [{
                "region": "fr-par",
                "total_region_impact": {"kg_co2_equivalent": 12.5, "m3_water_usage": 0.25},
                "zones": [{
                    "zone": "fr-par-1",
                    "total_zone_impact": {"kg_co2_equivalent": 12.5, "m3_water_usage": 0.25},
                    "skus": [{
                        "sku": "/compute/dev1_s/run_fr-par-1",
                        "total_sku_impact": {"kg_co2_equivalent": 12.5, "m3_water_usage": 0.25},
                        "service_category": "compute",
                        "product_category": "instances"
                    }]
                }]
            }]
        }]
    }
