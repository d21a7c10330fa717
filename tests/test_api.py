"""
House Hunters 테스트 - API
"""

import pytest
import sys
sys.path.insert(0, ".")

from fastapi.testclient import TestClient

from househunters.api.main import app
from househunters.api.routes import get_session
from househunters.pipeline import HouseHuntSession


class TestApi:
    """REST API 테스트"""

    def setup_method(self):
        self.session = HouseHuntSession()
        app.dependency_overrides[get_session] = lambda: self.session
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_root(self):
        """헬스 체크"""
        response = self.client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_criteria(self):
        """항목 목록과 가중치 변경"""
        response = self.client.get("/api/v1/criteria")
        assert response.status_code == 200
        assert len(response.json()) == len(self.session.criteria)

        response = self.client.put("/api/v1/criteria/location/weight", json={"weight": 2.5})
        assert response.status_code == 200
        assert response.json()["weight"] == 2.5
        assert self.session.criteria.get_weight("location") == 2.5

    def test_unknown_criterion(self):
        """없는 항목은 404"""
        response = self.client.put("/api/v1/criteria/pool/weight", json={"weight": 1})

        assert response.status_code == 404

    def test_reset_weights(self):
        """가중치 초기화"""
        self.session.set_weight("view", 0)

        response = self.client.post("/api/v1/criteria/reset")

        assert response.status_code == 200
        assert self.session.criteria.get_weight("view") == 1.0

    def test_create_and_rank_houses(self):
        """매물 추가 후 점수순 조회"""
        low = self.client.post("/api/v1/houses", json={
            "title": "low", "scores": {cid: 1 for cid in self.session.criteria.ids},
        })
        high = self.client.post("/api/v1/houses", json={
            "title": "high", "scores": {cid: 5 for cid in self.session.criteria.ids},
        })
        assert low.status_code == 201
        assert high.status_code == 201

        ranked = self.client.get("/api/v1/houses").json()

        assert [item["house"]["title"] for item in ranked] == ["high", "low"]
        assert ranked[0]["score"] == pytest.approx(100.0)
        assert ranked[1]["score"] == pytest.approx(20.0)

    def test_create_house_requires_title(self):
        """빈 제목은 422"""
        response = self.client.post("/api/v1/houses", json={"title": "", "scores": {}})

        assert response.status_code == 422

    def test_update_house(self):
        """매물 수정"""
        house = self.session.save_house("old", {"location": 1})

        response = self.client.put(
            f"/api/v1/houses/{house.id}", json={"title": "new", "scores": {"location": 4}}
        )

        assert response.status_code == 200
        assert self.session.store.get(house.id).title == "new"
        assert self.client.put(
            "/api/v1/houses/missing", json={"title": "x"}
        ).status_code == 404

    def test_export_import(self):
        """내보내기 파일을 다시 가져오기"""
        self.session.save_house("목동", self.session.new_scores())
        exported = self.client.get("/api/v1/export?fmt=xlsx")

        assert exported.status_code == 200
        assert "house-hunters-data.xlsx" in exported.headers["content-disposition"]

        self.session.save_house("추가 매물", {})
        response = self.client.post("/api/v1/import?fmt=xlsx", content=exported.content)

        assert response.status_code == 200
        assert response.json()["houses"] == 1
        assert len(self.session.store) == 1

    def test_import_invalid_file(self):
        """잘못된 파일은 400, 기존 상태 유지"""
        self.session.save_house("유지", {})

        response = self.client.post("/api/v1/import?fmt=json", content=b"{broken")

        assert response.status_code == 400
        assert len(self.session.store) == 1

    def test_unsupported_format(self):
        """지원하지 않는 형식은 400"""
        assert self.client.get("/api/v1/export?fmt=csv").status_code == 400


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
