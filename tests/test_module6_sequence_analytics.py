# file: tests/test_module6_sequence_analytics.py

"""
Unit tests for Module 6: Sequence Analytics.
"""

import pytest

from src.module6_sequence_analytics import (
    DEFAULT_COST_PER_BASE,
    analyze_sequence,
    classify_efficiency,
    compute_gc_content,
    compute_nucleotide_counts,
    compute_storage_efficiency,
    compute_symbol_error_rate,
    estimate_synthesis_cost,
)


class TestComposition:
    """Test nucleotide composition metrics."""
    
    def test_counts(self):
        """Test per-base counts."""
        assert compute_nucleotide_counts("AATGCCC") == {'A': 2, 'T': 1, 'G': 1, 'C': 3}
    
    def test_counts_ignore_foreign_characters(self):
        """Test characters outside the alphabet are not counted."""
        assert compute_nucleotide_counts("AN-T") == {'A': 1, 'T': 1, 'G': 0, 'C': 0}
    
    def test_gc_content(self):
        """Test GC fraction."""
        assert compute_gc_content("GGCA") == pytest.approx(0.75)
        assert compute_gc_content("ATAT") == 0.0
        assert compute_gc_content("GCGC") == 1.0
    
    def test_gc_content_empty(self):
        """Test empty sequences have zero GC content."""
        assert compute_gc_content("") == 0.0


class TestCost:
    """Test synthesis cost estimates."""
    
    def test_linear_cost(self):
        """Test cost scales with length."""
        assert estimate_synthesis_cost(0) == 0.0
        assert estimate_synthesis_cost(1000) == pytest.approx(100.0)
        assert estimate_synthesis_cost(10, cost_per_base=0.5) == pytest.approx(5.0)
    
    def test_monotonic(self):
        """Test longer sequences never cost less."""
        costs = [estimate_synthesis_cost(n) for n in range(0, 500, 50)]
        assert costs == sorted(costs)
    
    def test_negative_inputs(self):
        """Test negative length or cost raise ValueError."""
        with pytest.raises(ValueError):
            estimate_synthesis_cost(-1)
        with pytest.raises(ValueError):
            estimate_synthesis_cost(10, cost_per_base=-0.1)


class TestEfficiency:
    """Test storage efficiency labels."""
    
    @pytest.mark.parametrize("ratio, label", [
        (0.5, "Excellent"),
        (1.99, "Excellent"),
        (2.0, "Good"),
        (2.99, "Good"),
        (3.0, "Fair"),
        (3.99, "Fair"),
        (4.0, "Poor"),
        (10.0, "Poor"),
    ])
    def test_thresholds(self, ratio, label):
        """Test the <2 / <3 / <4 / else boundaries."""
        assert classify_efficiency(ratio) == label
    
    def test_storage_efficiency(self):
        """Test ratio, label and space saving."""
        stats = compute_storage_efficiency(100, 450)
        
        assert stats['compression_ratio'] == pytest.approx(4.5)
        assert stats['efficiency'] == "Poor"
        assert stats['space_saving'] == pytest.approx(-350.0)
    
    def test_storage_efficiency_zero_original(self):
        """Test empty originals do not divide by zero."""
        stats = compute_storage_efficiency(0, 136)
        
        assert stats['compression_ratio'] == 0.0
        assert stats['space_saving'] == 0.0
        assert stats['efficiency'] == "Excellent"
    
    def test_storage_efficiency_negative(self):
        """Test negative sizes are rejected."""
        with pytest.raises(ValueError):
            compute_storage_efficiency(-1, 10)


class TestAnalyzeSequence:
    """Test the combined summary."""
    
    def test_summary(self):
        """Test all summary fields."""
        stats = analyze_sequence("ATGCGC")
        
        assert stats['length'] == 6
        assert stats['gc_content'] == pytest.approx(4 / 6)
        assert stats['nucleotide_counts'] == {'A': 1, 'T': 1, 'G': 2, 'C': 2}
        assert stats['estimated_synthesis_cost'] == pytest.approx(6 * DEFAULT_COST_PER_BASE)
    
    def test_empty_summary(self):
        """Test empty sequences."""
        stats = analyze_sequence("")
        assert stats['length'] == 0
        assert stats['gc_content'] == 0.0
        assert stats['estimated_synthesis_cost'] == 0.0


class TestSymbolErrorRate:
    """Test symbol error rate."""
    
    def test_no_errors(self):
        """Test identical sequences."""
        assert compute_symbol_error_rate("ATGC", "ATGC") == 0.0
    
    def test_partial_errors(self):
        """Test the fraction of differing positions."""
        assert compute_symbol_error_rate("ATGC", "ATGA") == pytest.approx(0.25)
        assert compute_symbol_error_rate("AAAA", "TTTT") == 1.0
    
    def test_empty(self):
        """Test empty sequences have no errors."""
        assert compute_symbol_error_rate("", "") == 0.0
    
    def test_length_mismatch(self):
        """Test that length mismatch raises error."""
        with pytest.raises(ValueError, match="Length mismatch"):
            compute_symbol_error_rate("ATG", "ATGC")
