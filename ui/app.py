"""
House Hunters Streamlit UI
- 매물 목록: 현재 가중치 기준 점수순
- 항목 가중치: 0~3 슬라이더
- 매물 추가/수정: 항목별 1~5점
"""

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from househunters.config import settings
from househunters.pipeline import HouseHuntSession
from househunters.storage import ImportFormatError

st.set_page_config(
    page_title="House Hunters 2.0",
    page_icon="🏠",
    layout="wide",
)

# Session State 초기화
if "session" not in st.session_state:
    st.session_state.session = HouseHuntSession()
if "editing_id" not in st.session_state:
    st.session_state.editing_id = None
if "last_upload" not in st.session_state:
    st.session_state.last_upload = None
if "form_version" not in st.session_state:
    st.session_state.form_version = 0


def reset_form():
    """입력 폼 초기화"""
    st.session_state.editing_id = None
    st.session_state.form_version += 1


def render_toolbar(session: HouseHuntSession):
    """내보내기/가져오기"""
    col1, col2 = st.columns(2)
    with col1:
        fmt = st.radio("형식", ["xlsx", "json"], horizontal=True)
        st.download_button(
            "⬇️ 데이터 내보내기",
            data=session.export_bytes(fmt),
            file_name=session.export_filename(fmt),
            use_container_width=True,
        )
    with col2:
        uploaded = st.file_uploader("⬆️ 데이터 가져오기", type=["xlsx", "json"])
        if uploaded is not None and uploaded.file_id != st.session_state.last_upload:
            st.session_state.last_upload = uploaded.file_id
            fmt = uploaded.name.rsplit(".", 1)[-1]
            try:
                session.import_bytes(uploaded.getvalue(), fmt)
                reset_form()
                st.success(f"{len(session.store)}개 매물을 가져왔습니다")
            except ImportFormatError:
                st.error("잘못된 파일입니다")


def render_house_list(session: HouseHuntSession):
    """점수순 매물 목록"""
    st.subheader("📋 매물")
    ranked = session.ranked()
    if not ranked:
        st.caption("등록된 매물이 없습니다")
        return

    for item in ranked:
        house = item.house
        with st.container(border=True):
            col1, col2 = st.columns([3, 1])
            with col1:
                if st.button(f"✏️ {house.title}", key=f"edit_{house.id}"):
                    st.session_state.editing_id = house.id
                    st.session_state.form_version += 1
                    st.rerun()
            with col2:
                st.markdown(f"**{item.score:.1f}%**")
            if house.comments:
                st.caption(f"💬 {house.comments}")


def render_weights(session: HouseHuntSession):
    """항목 가중치 슬라이더"""
    st.subheader("⚖️ 항목 가중치")
    if st.button("기본값으로", use_container_width=True):
        session.reset_weights()
        st.rerun()

    for criterion in session.criteria.criteria:
        value = st.slider(
            criterion.name,
            min_value=settings.MIN_WEIGHT,
            max_value=settings.MAX_WEIGHT,
            value=float(criterion.weight),
            step=settings.WEIGHT_STEP,
            key=f"weight_{criterion.id}_{criterion.weight}",
        )
        if value != criterion.weight:
            session.set_weight(criterion.id, value)
            st.rerun()


def render_house_form(session: HouseHuntSession):
    """매물 추가/수정 폼"""
    editing = None
    if st.session_state.editing_id:
        editing = session.store.get(st.session_state.editing_id)

    st.subheader("🏠 매물 수정" if editing else "🏠 새 매물")
    version = st.session_state.form_version
    defaults = editing.scores if editing else session.new_scores()
    ratings = list(range(1, settings.MAX_RATING + 1))

    with st.form(key=f"house_form_{version}"):
        title = st.text_input(
            "제목",
            value=editing.title if editing else "",
            placeholder="이름 또는 주소",
        )

        scores = {}
        for criterion in session.criteria.criteria:
            current = int(defaults.get(criterion.id, settings.DEFAULT_RATING))
            if current not in ratings:
                current = settings.DEFAULT_RATING
            scores[criterion.id] = st.radio(
                criterion.name,
                ratings,
                index=ratings.index(current),
                horizontal=True,
            )

        comments = st.text_area(
            "메모",
            value=(editing.comments or "") if editing else "",
            placeholder="추가 메모...",
        )

        submitted = st.form_submit_button(
            "매물 수정" if editing else "매물 추가",
            use_container_width=True,
        )

    if submitted:
        if not title.strip():
            st.warning("제목을 입력하세요")
            return
        session.save_house(
            title,
            scores,
            comments or None,
            house_id=editing.id if editing else None,
        )
        reset_form()
        st.rerun()

    if editing and st.button("취소", use_container_width=True):
        reset_form()
        st.rerun()


def main():
    st.title("🏠 House Hunters 2.0")
    session = st.session_state.session

    render_toolbar(session)

    col1, col2, col3 = st.columns(3)
    with col1:
        render_house_list(session)
    with col2:
        render_weights(session)
    with col3:
        render_house_form(session)


if __name__ == "__main__":
    main()
