"""
설치(프로비저닝) 전용 모듈.
- 호스트 인터프리터를 찾고 가상환경을 만든 뒤 OCR 패키지와 모델을 준비.
"""

from . import commands, probe, resolve, install, manager

__all__ = ["commands", "probe", "resolve", "install", "manager"]
