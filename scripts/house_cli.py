#!/usr/bin/env python
"""
House Hunters 데이터 파일 CLI

사용법:
    python scripts/house_cli.py rank data.xlsx              # 점수순 매물 목록
    python scripts/house_cli.py template [폴더]             # 빈 내보내기 파일 생성
    python scripts/house_cli.py convert data.json data.xlsx # 형식 변환
"""

import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from househunters.config import settings
from househunters.pipeline import HouseHuntSession
from househunters.storage import ImportFormatError, codec_for_path


def load_session(path: str) -> HouseHuntSession:
    """파일을 읽어 세션 생성"""
    session = HouseHuntSession()
    session.import_file(path)
    return session


def cmd_rank(path: str):
    """점수순 매물 목록 출력"""
    session = load_session(path)
    ranked = session.ranked()

    print("=" * 60)
    print(f"🏠 {Path(path).name} - 매물 {len(ranked)}개")
    print("=" * 60)

    if not ranked:
        print("  (매물 없음)")
        return

    for item in ranked:
        print(f"{item.rank:>3}. {item.score:>5.1f}%  {item.house.title}")
        if item.house.comments:
            print(f"        💬 {item.house.comments}")

    print("-" * 60)
    weights = ", ".join(
        f"{c.id}={c.weight:g}" for c in session.criteria.criteria if c.weight != 1
    )
    print(f"가중치 변경 항목: {weights or '없음'}")
    print("=" * 60)


def cmd_template(directory: str = None):
    """기본 가중치만 담긴 빈 파일 생성"""
    path = HouseHuntSession().export_file(directory)
    print(f"📄 템플릿 생성: {path}")


def cmd_convert(src: str, dst: str):
    """형식 변환 (확장자로 판단)"""
    session = load_session(src)
    path = codec_for_path(dst).write(dst, session.criteria, session.store)
    print(f"🔁 {src} → {path} (매물 {len(session.store)}개)")


def print_help():
    """도움말 출력"""
    print(__doc__)


def main():
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    if len(sys.argv) < 2:
        print_help()
        return 0

    command = sys.argv[1].lower()

    try:
        if command == "rank" and len(sys.argv) > 2:
            cmd_rank(sys.argv[2])
        elif command == "template":
            cmd_template(sys.argv[2] if len(sys.argv) > 2 else None)
        elif command == "convert" and len(sys.argv) > 3:
            cmd_convert(sys.argv[2], sys.argv[3])
        elif command in ["help", "-h", "--help"]:
            print_help()
        else:
            print(f"❌ 알 수 없는 명령: {' '.join(sys.argv[1:])}")
            print_help()
            return 1
    except ImportFormatError as e:
        print(f"❌ 잘못된 파일: {e}")
        return 1
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
