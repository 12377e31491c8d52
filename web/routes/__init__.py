"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- dashboard: 대시보드 API
- journal: 거래 일지 API
- events: 이벤트 조회 / 추가
"""
