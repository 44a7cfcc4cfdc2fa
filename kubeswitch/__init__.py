# kubeswitch/__init__.py
# kubeconfig 의 current-context 와 네임스페이스를 전환하는 도구 모음입니다.

__version__ = "0.1.0"
