"""
House Hunters 테스트 - CriteriaSet
"""

import pytest
import sys
sys.path.insert(0, ".")

from househunters.domain.criteria import CriteriaSet, UnknownCriterionError, DEFAULT_CATEGORIES


class TestCriteriaSet:
    """평가 항목 집합 테스트"""

    def setup_method(self):
        self.criteria = CriteriaSet()

    def test_default_categories(self):
        """기본 항목은 고정 순서, 가중치 1"""
        assert self.criteria.ids == [cid for cid, _ in DEFAULT_CATEGORIES]
        assert len(self.criteria) == 18
        assert all(c.weight == 1.0 for c in self.criteria.criteria)

    def test_set_weight(self):
        """가중치 변경"""
        self.criteria.set_weight("location", 2.5)

        assert self.criteria.get_weight("location") == 2.5
        assert self.criteria.get_weight("floor") == 1.0

    def test_set_weight_no_clamping(self):
        """범위 밖 값도 그대로 저장 (범위 제한은 화면 책임)"""
        self.criteria.set_weight("view", 7)
        assert self.criteria.get_weight("view") == 7

    def test_set_weight_unknown(self):
        """등록되지 않은 항목"""
        with pytest.raises(UnknownCriterionError):
            self.criteria.set_weight("pool", 1.0)

        assert "pool" not in self.criteria.weights

    def test_zero_weight_keeps_criterion(self):
        """가중치 0이어도 항목은 유지"""
        self.criteria.set_weight("elevator", 0)

        assert "elevator" in self.criteria
        assert self.criteria.get_weight("elevator") == 0

    def test_replace_weights_ignores_unknown(self):
        """가져오기용 전체 교체: 모르는 항목 무시, 빠진 항목은 기본값"""
        self.criteria.set_weight("floor", 3)
        self.criteria.replace_weights({"location": 2, "pool": 5})

        assert self.criteria.get_weight("location") == 2
        assert self.criteria.get_weight("floor") == 1.0
        assert "pool" not in self.criteria

    def test_reset(self):
        """기본값 초기화"""
        self.criteria.set_weight("parking", 0.3)
        self.criteria.reset()

        assert self.criteria.get_weight("parking") == 1.0

    def test_weights_is_copy(self):
        """weights는 복사본"""
        weights = self.criteria.weights
        weights["location"] = 99

        assert self.criteria.get_weight("location") == 1.0

    def test_duplicate_ids_rejected(self):
        """중복 항목 ID"""
        with pytest.raises(ValueError):
            CriteriaSet(categories=[("a", "A"), ("a", "B")])

    def test_from_weights(self):
        """가중치 딕셔너리로 생성"""
        criteria = CriteriaSet.from_weights({"A": 0, "B": 2})

        assert criteria.ids == ["A", "B"]
        assert criteria.total_weight() == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
