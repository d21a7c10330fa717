"""
엑셀 Codec
가중치 시트("Weights")와 매물 시트("Houses")로 구성된 .xlsx 파일을 읽고 씁니다.
"""

import io
from typing import Iterable

import pandas as pd

from househunters.domain.criteria import CriteriaSet
from househunters.schemas.house import House
from .base import BaseCodec, ImportFormatError, ImportedData, parse_score, to_number, to_text


WEIGHTS_SHEET = "Weights"
HOUSES_SHEET = "Houses"

# 가중치 시트 컬럼
COL_CATEGORY_ID = "CategoryID"
COL_CATEGORY_NAME = "CategoryName"
COL_WEIGHT = "Weight"

# 매물 시트 고정 컬럼 (뒤에 항목 ID 컬럼이 이어짐)
COL_ID = "ID"
COL_TITLE = "Title"
COL_COMMENTS = "Comments"


class ExcelCodec(BaseCodec):
    """
    엑셀 내보내기/가져오기

    Weights: CategoryID, CategoryName, Weight (항목 순서 고정)
    Houses:  ID, Title, Comments, <항목 ID...> (평점, 없으면 0)
    """

    name = "xlsx"
    extension = ".xlsx"
    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def weights_frame(self, criteria: CriteriaSet) -> pd.DataFrame:
        """가중치 시트 데이터"""
        rows = [
            {
                COL_CATEGORY_ID: c.id,
                COL_CATEGORY_NAME: c.name,
                COL_WEIGHT: c.weight,
            }
            for c in criteria.criteria
        ]
        return pd.DataFrame(rows, columns=[COL_CATEGORY_ID, COL_CATEGORY_NAME, COL_WEIGHT])

    def houses_frame(self, criteria: CriteriaSet, houses: Iterable[House]) -> pd.DataFrame:
        """매물 시트 데이터"""
        columns = [COL_ID, COL_TITLE, COL_COMMENTS] + criteria.ids
        rows = []
        for house in houses:
            row = {
                COL_ID: house.id,
                COL_TITLE: house.title,
                COL_COMMENTS: house.comments,
            }
            for cid in criteria.ids:
                row[cid] = house.scores.get(cid, 0)
            rows.append(row)
        return pd.DataFrame(rows, columns=columns)

    def dumps(self, criteria: CriteriaSet, houses: Iterable[House]) -> bytes:
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            self.weights_frame(criteria).to_excel(
                writer, sheet_name=WEIGHTS_SHEET, index=False
            )
            self.houses_frame(criteria, houses).to_excel(
                writer, sheet_name=HOUSES_SHEET, index=False
            )
        return buffer.getvalue()

    def _parse(self, data: bytes, criteria: CriteriaSet) -> ImportedData:
        # "NA", "None" 같은 문자열도 그대로 읽음 (빈 셀만 빈 값)
        sheets = pd.read_excel(
            io.BytesIO(data), sheet_name=None, engine="openpyxl", keep_default_na=False
        )

        for sheet in (WEIGHTS_SHEET, HOUSES_SHEET):
            if sheet not in sheets:
                raise ImportFormatError(f"Missing sheet: {sheet}")

        weights = self._parse_weights(sheets[WEIGHTS_SHEET], criteria)
        houses = self._parse_houses(sheets[HOUSES_SHEET], criteria)
        return ImportedData(weights=weights, houses=houses)

    def _parse_weights(self, df: pd.DataFrame, criteria: CriteriaSet) -> dict[str, float]:
        """가중치 시트 파싱: 등록되지 않은 항목과 숫자가 아닌 가중치는 건너뜀"""
        for column in (COL_CATEGORY_ID, COL_WEIGHT):
            if column not in df.columns:
                raise ImportFormatError(f"{WEIGHTS_SHEET}: missing column {column}")

        weights = {}
        for row in df.to_dict(orient="records"):
            cid = to_text(row.get(COL_CATEGORY_ID))
            weight = to_number(row.get(COL_WEIGHT))
            if cid is None or weight is None:
                continue
            if cid not in criteria:
                self.logger.debug(f"Ignoring unknown category: {cid}")
                continue
            weights[cid] = weight
        return weights

    def _parse_houses(self, df: pd.DataFrame, criteria: CriteriaSet) -> list[House]:
        """매물 시트 파싱: 평점 셀이 비었거나 숫자가 아니면 0"""
        if COL_ID not in df.columns:
            raise ImportFormatError(f"{HOUSES_SHEET}: missing column {COL_ID}")

        houses = []
        for i, row in enumerate(df.to_dict(orient="records"), start=2):
            house_id = to_text(row.get(COL_ID))
            if house_id is None:
                self.logger.warning(f"{HOUSES_SHEET} row {i}: empty ID, skipped")
                continue

            scores = {}
            for cid in criteria.ids:
                value = row.get(cid)
                scores[cid] = parse_score(value)
                if to_number(value) is None:
                    self.logger.debug(f"{HOUSES_SHEET} row {i}: {cid} defaulted to 0")

            comments = to_text(row.get(COL_COMMENTS))
            houses.append(House(
                id=house_id,
                title=to_text(row.get(COL_TITLE)) or "",
                scores=scores,
                comments=comments or None,
            ))
        return houses
