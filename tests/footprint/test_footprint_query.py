"""Tests for footprint filter parsing."""

from datetime import datetime, timezone
import pytest
from planimpact.footprint import (
    ProductCategory,
    ServiceCategory,
    parse_csv,
    parse_date,
    parse_product_categories,
    parse_service_categories,
    trailing_window,
)
from planimpact.utils.errors import QueryValidationError


class TestParseCsv:
    """Test comma-separated filters."""
    
    def test_splits_and_drops_blanks(self):
        assert parse_csv("a, ,b", None, "c,") == ["a", "b", "c"]
    
    def test_empty(self):
        assert parse_csv() == []
        assert parse_csv("") == []


class TestParseDate:
    """Test date parsing."""
    
    def test_plain_date_is_utc_midnight(self):
        assert parse_date("2026-09-01") == datetime(2026, 9, 1, tzinfo=timezone.utc)
    
    def test_rfc3339_zulu(self):
        assert parse_date("2026-09-01T12:30:00Z") == datetime(2026, 9, 1, 12, 30, tzinfo=timezone.utc)
    
    def test_rfc3339_offset_converted(self):
        assert parse_date("2026-09-01T12:00:00+02:00") == datetime(2026, 9, 1, 10, 0, tzinfo=timezone.utc)
    
    def test_empty(self):
        with pytest.raises(QueryValidationError, match="date is empty"):
            parse_date("  ")
    
    @pytest.mark.parametrize("raw", ["yesterday", "2026/09/01", "2026-09-01T12:00:00"])
    def test_invalid(self, raw):
        """Test unknown layouts and timestamps without an offset."""
        with pytest.raises(QueryValidationError, match="use YYYY-MM-DD or RFC3339"):
            parse_date(raw)


class TestParseCategories:
    """Test category filters."""
    
    def test_service_categories(self):
        assert parse_service_categories("Compute, storage") == [ServiceCategory.COMPUTE, ServiceCategory.STORAGE]
    
    def test_product_category_spellings(self):
        """Test separators and case are ignored."""
        assert parse_product_categories("block-storage,Elastic Metal,apple_silicon") == [
            ProductCategory.BLOCK_STORAGE,
            ProductCategory.ELASTIC_METAL,
            ProductCategory.APPLE_SILICON,
        ]
    
    def test_none_is_no_filter(self):
        assert parse_service_categories(None) == []
        assert parse_product_categories("") == []
    
    def test_unknown_service_category(self):
        with pytest.raises(QueryValidationError, match="--service-category value 'network'"):
            parse_service_categories("compute,network")
    
    def test_unknown_product_category(self):
        with pytest.raises(QueryValidationError, match="--product-category value 'gpu'"):
            parse_product_categories("gpu")


class TestTrailingWindow:
    """Test the doctor query window."""
    
    def test_window(self):
        now = datetime(2026, 10, 19, 8, 0, 0, 123456, tzinfo=timezone.utc)
        
        start, end = trailing_window(now, 30)
        
        assert end == datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)
        assert start == datetime(2026, 9, 19, 8, 0, 0, tzinfo=timezone.utc)
    
    def test_naive_now_treated_as_utc(self):
        start, end = trailing_window(datetime(2026, 10, 19), 1)
        
        assert end.tzinfo is not None
        assert start == datetime(2026, 10, 18, tzinfo=timezone.utc)
