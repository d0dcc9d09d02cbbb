"""Tests for footprint estimation."""

from unittest.mock import patch
import pytest
from planimpact.estimate.estimator import (
    MONTHLY_HOURS,
    build_report,
    normalize_quantity,
    row_from_match,
    summarize_rows,
    unit_to_month_multiplier,
    unsupported_from_error,
)
from planimpact.contracts.report import Row
from planimpact.estimate.transitions import action_transitions
from planimpact.mapping.models import Match
from planimpact.utils.errors import MissingRequiredAttributeError


@pytest.fixture
def instance_product(make_product):
    return make_product("/compute/dev1_s/run_fr-par-1", kg=0.001, m3=0.0002, unit="hour", zone="fr-par-1")


def _row(kg=None, m3=None, address="a"):
    return Row(
        address=address,
        type="scaleway_instance_server",
        action="create",
        sku="/compute/x",
        kgco2e_month=kg,
        kgco2e_known=kg is not None,
        m3_water_month=m3,
        m3_water_known=m3 is not None
    )


class TestUnitConversion:
    """Unit and bundle-size normalization."""
    
    def test_unit_multipliers(self):
        assert unit_to_month_multiplier("hour") == MONTHLY_HOURS
        assert unit_to_month_multiplier("HOUR") == 730.0
        assert unit_to_month_multiplier("month") == 1.0
        assert unit_to_month_multiplier("year") == pytest.approx(1.0 / 12.0)
        assert unit_to_month_multiplier("gigabyte") == 1.0
        assert unit_to_month_multiplier("") == 1.0
    
    def test_size_zero_or_one_does_not_divide(self):
        assert normalize_quantity(50.0, 0) == 50.0
        assert normalize_quantity(50.0, 1) == 50.0
        assert normalize_quantity(50.0, 100) == 0.5


class TestBuildReport:
    """End-to-end estimation over resolved changes."""
    
    def test_hourly_instance_create(self, make_change, instance_product):
        change = make_change("scaleway_instance_server", after={"type": "DEV1-S", "zone": "fr-par-1"})
        
        report = build_report([change], [instance_product])
        
        assert len(report.rows) == 1
        row = report.rows[0]
        assert row.action == "create"
        assert row.sku == "/compute/dev1_s/run_fr-par-1"
        assert row.kgco2e_month == pytest.approx(0.73, abs=1e-9)
        assert row.m3_water_month == pytest.approx(0.146, abs=1e-9)
        assert report.totals.kgco2e_month == pytest.approx(0.73, abs=1e-9)
        assert report.totals.kgco2e_known is True
        assert report.totals.unknown_rows == 0
    
    def test_block_volume_bundle_size(self, make_product, make_change):
        products = [make_product("/storage/block/sbs_5k/fr-par-1", kg=10.0, unit="month", size=100, zone="fr-par-1")]
        change = make_change("scaleway_block_volume", after={"size_in_gb": 50, "zone": "fr-par-1"})
        
        report = build_report([change], products)
        
        assert report.rows[0].kgco2e_month == pytest.approx(5.0)
        assert report.totals.kgco2e_month == pytest.approx(5.0)
    
    def test_delete_is_negative(self, make_change, instance_product):
        change = make_change(
            "scaleway_instance_server",
            actions=("delete",),
            before={"type": "DEV1-S", "zone": "fr-par-1"}
        )
        
        report = build_report([change], [instance_product])
        
        assert report.rows[0].action == "delete"
        assert report.rows[0].kgco2e_month == pytest.approx(-0.73, abs=1e-9)
    
    def test_replace_with_same_config_nets_to_zero(self, make_change, instance_product):
        attrs = {"type": "DEV1-S", "zone": "fr-par-1"}
        change = make_change(
            "scaleway_instance_server",
            actions=("delete", "create"),
            before=attrs,
            after=attrs
        )
        
        report = build_report([change], [instance_product])
        
        assert [r.action for r in report.rows] == ["delete", "create"]
        assert report.totals.kgco2e_month == pytest.approx(0.0, abs=1e-12)
        assert report.totals.m3_water_month == pytest.approx(0.0, abs=1e-12)
    
    def test_update_reports_delta(self, make_product, make_change):
        products = [make_product("/storage/block/sbs_5k/fr-par-1", kg=0.01, unit="month", zone="fr-par-1")]
        change = make_change(
            "scaleway_block_volume",
            actions=("update",),
            before={"size_in_gb": 20, "zone": "fr-par-1"},
            after={"size_in_gb": 50, "zone": "fr-par-1"}
        )
        
        report = build_report([change], products)
        
        assert [r.action for r in report.rows] == ["update", "update"]
        assert report.totals.kgco2e_month == pytest.approx(0.3)
    
    def test_no_op_and_read_yield_nothing(self, make_change, instance_product):
        attrs = {"type": "DEV1-S", "zone": "fr-par-1"}
        changes = [
            make_change("scaleway_instance_server", actions=("no-op",), before=attrs, after=attrs),
            make_change("scaleway_instance_server", actions=("read",), after=attrs),
        ]
        
        report = build_report(changes, [instance_product])
        
        assert report.rows == []
        assert report.unsupported == []
    
    def test_unknown_co2_is_not_zero(self, make_product, make_change):
        products = [make_product("/compute/dev1_s/run_fr-par-1", kg=None, m3=0.001, zone="fr-par-1")]
        change = make_change("scaleway_instance_server", after={"type": "DEV1-S", "zone": "fr-par-1"})
        
        report = build_report([change], products)
        
        row = report.rows[0]
        assert row.kgco2e_month is None
        assert row.kgco2e_known is False
        assert row.m3_water_known is True
        assert report.totals.unknown_rows == 1
        assert report.totals.kgco2e_known is False
        assert report.totals.m3_water_known is True
        assert report.totals.m3_water_month == pytest.approx(0.73)
    
    def test_missing_estimation_block_is_unknown(self, make_product, make_change):
        products = [make_product("/compute/dev1_s/run_fr-par-1", zone="fr-par-1", with_estimation=False)]
        change = make_change("scaleway_instance_server", after={"type": "DEV1-S", "zone": "fr-par-1"})
        
        report = build_report([change], products)
        
        assert report.rows[0].has_unknown
        assert report.totals.kgco2e_known is False
        assert report.totals.m3_water_known is False
        assert report.totals.kgco2e_month == 0.0
    
    def test_unsupported_type_is_recorded(self, make_change, instance_product):
        change = make_change("scaleway_object_bucket", address="scaleway_object_bucket.assets", after={"name": "assets"})
        
        report = build_report([change], [instance_product])
        
        assert report.rows == []
        assert len(report.unsupported) == 1
        assert report.unsupported[0].address == "scaleway_object_bucket.assets"
        assert report.unsupported[0].code == "not_implemented"
        assert report.unsupported[0].reason == "not implemented"
    
    def test_failures_do_not_abort_batch(self, make_change, instance_product):
        changes = [
            make_change("scaleway_object_bucket", after={"name": "assets"}),
            make_change("scaleway_instance_server", address="scaleway_instance_server.bad", after={"zone": "fr-par-1"}),
            make_change("scaleway_instance_server", after={"type": "DEV1-S", "zone": "fr-par-1"}),
        ]
        
        report = build_report(changes, [instance_product])
        
        assert len(report.rows) == 1
        assert [u.code for u in report.unsupported] == ["not_implemented", "missing_required_attribute"]
    
    def test_replace_of_unsupported_records_both_sides(self, make_change):
        change = make_change(
            "scaleway_object_bucket",
            actions=("delete", "create"),
            before={"name": "a"},
            after={"name": "b"}
        )
        
        report = build_report([change], [])
        
        assert len(report.unsupported) == 2
    
    def test_redis_cluster_rows_per_role(self, make_product, make_change):
        products = [
            make_product("/storage/redis/main-node/RED1-micro/fr-par-1", kg=0.002, zone="fr-par-1"),
            make_product("/storage/redis/additional-node/RED1-micro/fr-par-1", kg=0.001, zone="fr-par-1"),
        ]
        change = make_change(
            "scaleway_redis_cluster",
            after={"zone": "fr-par-1", "node_type": "RED1-MICRO", "cluster_size": 3}
        )
        
        report = build_report([change], products)
        
        assert len(report.rows) == 2
        assert report.totals.kgco2e_month == pytest.approx(0.002 * 730 + 0.001 * 2 * 730)
    
    def test_debug_log_names_primary_sku_and_quantity(self, make_product, make_change):
        """Test the per-resource debug line uses the primary product and total quantity."""
        products = [
            make_product("/storage/redis/main-node/RED1-micro/fr-par-1", kg=0.002, zone="fr-par-1"),
            make_product("/storage/redis/additional-node/RED1-micro/fr-par-1", kg=0.001, zone="fr-par-1"),
        ]
        change = make_change(
            "scaleway_redis_cluster",
            address="scaleway_redis_cluster.cache",
            after={"zone": "fr-par-1", "node_type": "RED1-MICRO", "cluster_size": 3}
        )
        
        with patch("planimpact.estimate.estimator.logger") as mock_logger:
            build_report([change], products)
        
        messages = [c[0][0] for c in mock_logger.debug.call_args_list]
        assert messages == [
            "scaleway_redis_cluster.cache (create): /storage/redis/main-node/RED1-micro/fr-par-1 "
            "x3 across 2 role(s)"
        ]
    
    def test_empty_changes(self):
        report = build_report([], [])
        
        assert report.rows == []
        assert report.totals.kgco2e_month == 0.0
        assert report.totals.kgco2e_known is True


class TestSummarizeRows:
    """Totals folding."""
    
    def test_known_flags_are_independent(self):
        totals = summarize_rows([_row(kg=1.0, m3=None), _row(kg=2.0, m3=0.5)])
        
        assert totals.kgco2e_month == pytest.approx(3.0)
        assert totals.kgco2e_known is True
        assert totals.m3_water_month == pytest.approx(0.5)
        assert totals.m3_water_known is False
        assert totals.unknown_rows == 1
    
    def test_row_unknown_in_both_metrics_counts_once(self):
        totals = summarize_rows([_row(), _row(kg=1.0, m3=1.0)])
        
        assert totals.unknown_rows == 1


class TestUnsupportedFromError:
    """Failure classification."""
    
    def test_resolution_error_keeps_code_and_reason(self):
        error = MissingRequiredAttributeError("missing required attribute: type")
        
        entry = unsupported_from_error("x.y", error)
        
        assert entry.code == "missing_required_attribute"
        assert entry.reason == "missing required attribute: type"
    
    def test_no_error_defaults_to_no_match(self):
        entry = unsupported_from_error("x.y", None)
        
        assert entry.code == "no_catalog_match"
        assert entry.reason == "no matching catalog product"


class TestRowFromMatch:
    """Row arithmetic for a single match."""
    
    def test_bundle_priced_storage(self, make_product, make_change):
        """Test 250 units of a per-100 monthly rate."""
        product = make_product("/storage/block/b_ssd/fr-par-1", kg=2.0, unit="month", size=100)
        transition = action_transitions(make_change("scaleway_block_volume", after={"size_in_gb": 250}))[0]
        
        row = row_from_match(transition, Match(product=product, quantity=250))
        
        assert row.kgco2e_month == 5.0
        assert row.m3_water_month is None
        assert row.m3_water_known is False
