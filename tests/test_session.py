"""
House Hunters 테스트 - Session
"""

from types import SimpleNamespace

import pytest
import sys
sys.path.insert(0, ".")

import househunters.pipeline.session as session_module
from househunters.config import settings
from househunters.domain.criteria import CriteriaSet
from househunters.domain.scoring import ScoringEngine
from househunters.domain.store import HouseStore
from househunters.pipeline import HouseHuntSession
from househunters.storage import ImportFormatError, ImportedData
from househunters.schemas.house import House


class TestSessionHouses:
    """매물 추가/수정 테스트"""

    def setup_method(self):
        self.session = HouseHuntSession()

    def test_injected_empty_state_kept(self):
        """빈 저장소/항목 집합을 넘겨도 같은 객체를 사용"""
        engine = ScoringEngine(max_rating=10)
        store = HouseStore(engine=engine)
        criteria = CriteriaSet.from_weights({"A": 1})
        session = HouseHuntSession(criteria=criteria, store=store)

        session.save_house("t", {"A": 10})

        assert session.store is store
        assert session.criteria is criteria
        assert len(store) == 1
        assert session.ranked()[0].score == pytest.approx(100.0)

    def test_new_scores_default(self):
        """새 매물 기본 평점은 모든 항목 3점"""
        scores = self.session.new_scores()

        assert set(scores) == set(self.session.criteria.ids)
        assert all(v == settings.DEFAULT_RATING for v in scores.values())

    def test_save_new_house(self):
        """새 매물 추가 시 ID 생성"""
        house = self.session.save_house("목동", self.session.new_scores(), "메모")

        assert house.id.isdigit()
        assert self.session.store.get(house.id).comments == "메모"

    def test_ids_unique_within_same_millisecond(self, monkeypatch):
        """같은 밀리초에 추가해도 ID 중복 없음"""
        monkeypatch.setattr(session_module, "time", SimpleNamespace(time=lambda: 1.0))

        first = self.session.save_house("a", {})
        second = self.session.save_house("b", {})

        assert first.id == "1000"
        assert second.id == "1001"
        assert len(self.session.store) == 2

    def test_edit_house(self):
        """ID를 지정하면 기존 매물 교체"""
        house = self.session.save_house("old", {"location": 1})
        self.session.save_house("new", {"location": 5}, house_id=house.id)

        assert len(self.session.store) == 1
        assert self.session.store.get(house.id).title == "new"

    @pytest.mark.parametrize("title", ["", "   "])
    def test_title_required(self, title):
        """제목이 비어 있으면 저장하지 않음"""
        with pytest.raises(ValueError):
            self.session.save_house(title, {})

        assert len(self.session.store) == 0

    def test_ranked(self):
        """가중치 변경이 순위에 반영"""
        a = self.session.save_house("a", {"location": 5, "view": 1})
        b = self.session.save_house("b", {"location": 1, "view": 5})
        for cid in self.session.criteria.ids:
            self.session.set_weight(cid, 0)

        self.session.set_weight("view", 1)
        assert [i.house.id for i in self.session.ranked()] == [b.id, a.id]

        self.session.reset_weights()
        self.session.set_weight("location", 3)
        assert [i.house.id for i in self.session.ranked()] == [a.id, b.id]


class TestSessionImportExport:
    """내보내기/가져오기 테스트"""

    def setup_method(self):
        self.session = HouseHuntSession()
        self.session.set_weight("parking", 2.5)
        self.house = self.session.save_house(
            "목동 7단지", self.session.new_scores(), "주차 편함"
        )

    @pytest.mark.parametrize("fmt", ["xlsx", "json"])
    def test_round_trip(self, fmt):
        """내보낸 파일을 새 세션에서 가져오기"""
        data = self.session.export_bytes(fmt)

        other = HouseHuntSession()
        other.save_house("지워질 매물", {})
        other.import_bytes(data, fmt)

        assert other.criteria.weights == self.session.criteria.weights
        assert len(other.store) == 1
        restored = other.store.get(self.house.id)
        assert restored.title == "목동 7단지"
        assert restored.comments == "주차 편함"
        assert restored.scores == self.house.scores

    def test_export_file(self, tmp_path):
        """고정 파일 이름으로 저장 후 경로로 가져오기"""
        path = self.session.export_file(tmp_path)

        assert path.name == f"{settings.EXPORT_BASE_FILENAME}.xlsx"
        assert path.exists()

        other = HouseHuntSession()
        other.import_file(path)
        assert other.store.get(self.house.id) is not None

    def test_failed_import_keeps_state(self):
        """가져오기 실패 시 기존 상태 유지"""
        weights_before = self.session.criteria.weights

        with pytest.raises(ImportFormatError):
            self.session.import_bytes(b"garbage", "xlsx")

        assert self.session.criteria.weights == weights_before
        assert self.session.store.get(self.house.id) is not None

    def test_superseded_import_ignored(self):
        """나중에 시작한 가져오기만 적용"""
        first = self.session.begin_import()
        second = self.session.begin_import()

        stale = ImportedData(houses=[House(id="stale", title="stale")])
        latest = ImportedData(houses=[House(id="latest", title="latest")])

        assert self.session.apply_import(first, stale) is False
        assert self.session.store.get("stale") is None

        assert self.session.apply_import(second, latest) is True
        assert [h.id for h in self.session.store] == ["latest"]

    def test_import_resets_unlisted_weights(self):
        """파일에 없는 항목의 가중치는 기본값"""
        self.session.import_bytes(b'{"weights": {"view": 2}, "houses": []}', "json")

        assert self.session.criteria.get_weight("view") == 2
        assert self.session.criteria.get_weight("parking") == settings.DEFAULT_WEIGHT
        assert len(self.session.store) == 0

    def test_import_unsupported_extension(self, tmp_path):
        """지원하지 않는 확장자는 ImportFormatError, 기존 상태 유지"""
        path = tmp_path / "houses.csv"
        path.write_text("ID,Title\n1,t\n", encoding="utf-8")

        with pytest.raises(ImportFormatError):
            self.session.import_file(path)
        with pytest.raises(ImportFormatError):
            self.session.import_bytes(b"ID,Title", "csv")

        assert self.session.store.get(self.house.id) is not None
        assert self.session.criteria.get_weight("parking") == 2.5

    def test_unsupported_format(self):
        """지원하지 않는 형식"""
        with pytest.raises(ValueError):
            self.session.export_bytes("csv")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
