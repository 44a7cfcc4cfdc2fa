# core/cluster.py
# 이 파일은 현재 컨텍스트의 자격 증명으로 클러스터에 접속해
# 네임스페이스 목록을 조회하는 기능을 포함합니다.
# 조회는 읽기 전용이며 kubeconfig 내용은 바꾸지 않습니다.

import os  # 경로 목록을 KUBECONFIG 형식으로 합치기 위해 사용합니다.
from typing import List

import urllib3  # kubernetes 클라이언트의 전송 계층 예외를 잡기 위해 사용합니다.
from kubernetes import client, config  # Kubernetes 클라이언트 및 설정 관리를 위해 사용합니다.
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException

from kubeswitch.core.errors import ClusterUnreachableError
from kubeswitch.core.kubeconfig import KubeConfig


class ClusterNamespaceLister:
    """
    kubernetes 공식 클라이언트로 네임스페이스 목록을 가져오는 조회기입니다.

    API 클라이언트는 호출할 때마다 새로 만듭니다. 한 번의 실행에서 한 번만 조회하므로
    캐시는 두지 않습니다.
    """

    def create_core_api(self, kubeconfig: KubeConfig, context_name: str) -> client.CoreV1Api:
        """
        지정된 컨텍스트에 대한 CoreV1Api 클라이언트를 생성합니다.

        병합에 사용한 파일 목록을 넘겨서 클라이언트 쪽 병합기가
        인증서 같은 상대 경로를 각 파일 기준으로 해석하도록 합니다.
        클라이언트 병합기는 빈 파일을 거부하므로 빈 문서였던 파일은 제외합니다.

        Args:
            kubeconfig (KubeConfig): 로드된 kubeconfig.
            context_name (str): 사용할 컨텍스트 이름.

        Returns:
            client.CoreV1Api: Core API 클라이언트 (Namespaces 조회용).
        """
        config_file = os.pathsep.join(
            str(path) for path, document in zip(kubeconfig.sources, kubeconfig.documents) if document
        )
        api_client = config.new_client_from_config(
            config_file=config_file,
            context=context_name,
            persist_config=False,
        )
        return client.CoreV1Api(api_client)

    def list_namespaces(self, kubeconfig: KubeConfig, context_name: str) -> List[str]:
        """
        클러스터의 네임스페이스 이름 목록을 API 가 돌려준 순서 그대로 반환합니다.

        Raises:
            ClusterUnreachableError: 설정, 인증 또는 네트워크 오류로 조회에 실패한 경우.
        """
        try:
            core = self.create_core_api(kubeconfig, context_name)
            namespaces = core.list_namespace()
        except ApiException as err:
            raise ClusterUnreachableError(
                f"failed to list namespaces in context {context_name!r}: {err.status} {err.reason}"
            ) from err
        except (ConfigException, urllib3.exceptions.HTTPError, OSError) as err:
            raise ClusterUnreachableError(
                f"failed to list namespaces in context {context_name!r}: {err}"
            ) from err
        return [ns.metadata.name for ns in namespaces.items]
