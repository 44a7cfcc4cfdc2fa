# models/context.py
# 이 파일은 Kubernetes 컨텍스트 정보를 나타내는 데이터 클래스를 정의합니다.

from dataclasses import dataclass, field  # 데이터 클래스 생성을 위해 사용합니다.
from pathlib import Path  # 컨텍스트가 정의된 파일 경로를 표현합니다.
from typing import Optional


@dataclass
class ContextEntry:
    """
    kubeconfig 의 `contexts` 항목 하나를 나타내는 데이터 클래스입니다.

    Attributes:
        name (str): 컨텍스트의 이름.
        cluster (str): 참조하는 클러스터 이름.
        user (str): 참조하는 사용자(authInfo) 이름.
        namespace (str): 기본 네임스페이스. 빈 문자열이면 "default" 를 의미합니다.
        source (Optional[Path]): 이 컨텍스트를 처음 정의한 kubeconfig 파일.
    """
    name: str  # 컨텍스트 이름
    cluster: str = ""  # 클러스터 이름
    user: str = ""  # 사용자 이름
    namespace: str = ""  # 네임스페이스 (없으면 빈 문자열)
    source: Optional[Path] = field(default=None, compare=False)  # 원본 파일


@dataclass
class ContextInfo:
    """
    목록 조회용으로 사용하는 컨텍스트 정보 데이터 클래스입니다.

    Attributes:
        name (str): 컨텍스트의 이름.
        cluster (str): 컨텍스트가 속한 클러스터의 이름.
        user (str): 컨텍스트에 연결된 사용자의 이름.
        namespace (str): 컨텍스트에 설정된 네임스페이스 (기본값 반영).
        current (bool): 이 컨텍스트가 현재 활성화된 컨텍스트인지 여부.
    """
    name: str  # 컨텍스트 이름
    cluster: str  # 클러스터 이름
    user: str  # 사용자 이름
    namespace: str  # 네임스페이스
    current: bool  # 현재 활성 컨텍스트 여부
