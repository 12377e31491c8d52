"""
Bullboard CLI 패키지

python -m cli 로 실행
"""
