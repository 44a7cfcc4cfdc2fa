# kubeswitch/cli.py
# kubectl-ctx, kubectl-ns 명령을 정의합니다.
# 인자가 없으면 현재 값을 보여주고 대화형 선택기를 띄우며,
# 인자가 있으면 바로 전환합니다.

import logging
from typing import Optional

import click

from kubeswitch.core.context import ContextManager
from kubeswitch.core.errors import KubeSwitchError, NoContextsError
from kubeswitch.core.kubeconfig import load_kubeconfig
from kubeswitch.core.log import build_cli_logger, fields
from kubeswitch.core.namespace import NamespaceLister, NamespaceManager
from kubeswitch.core.picker import ClickPicker, Picker

KUBECONFIG_HELP = "Kubeconfig path list, separated like KUBECONFIG (first file receives changes)."


def run_context_switch(
    log: logging.Logger, picker: Picker, target: Optional[str], kubeconfig: Optional[str] = None
) -> None:
    """컨텍스트 전환 흐름을 실행합니다. 실패하면 KubeSwitchError 를 그대로 올립니다."""
    manager = ContextManager(load_kubeconfig(env_value=kubeconfig))
    log.debug("Loaded kubeconfig", extra=fields(files=len(manager.kubeconfig.sources)))

    current = manager.current_context()
    contexts = manager.list_contexts()
    if not contexts:
        raise NoContextsError("no contexts found in kubeconfig")

    if target is None:
        if current:
            log.info("Current context", extra=fields(context=current))
        else:
            log.warning("No current context set")
        target = picker.select("Select context:", contexts, default=current or None)

    if not manager.switch_to(target):
        log.info("Already on context", extra=fields(context=target))
        return
    log.info("Switched to context", extra=fields(context=target))


def run_namespace_switch(
    log: logging.Logger,
    picker: Picker,
    target: Optional[str],
    kubeconfig: Optional[str] = None,
    lister: Optional[NamespaceLister] = None,
) -> None:
    """네임스페이스 전환 흐름을 실행합니다. 클러스터 조회가 실패하면 명령 전체가 실패합니다."""
    manager = NamespaceManager(load_kubeconfig(env_value=kubeconfig), lister=lister)
    current = manager.current_namespace()

    if target is None:
        log.info("Current namespace", extra=fields(namespace=current))
        namespaces = manager.list_from_cluster()
        log.debug("Fetched namespaces", extra=fields(count=len(namespaces)))
        target = picker.select("Select namespace:", namespaces, default=current)

    if not manager.switch_to(target):
        log.info("Already on namespace", extra=fields(namespace=target))
        return
    log.info(
        "Switched to namespace",
        extra=fields(namespace=target, context=manager.current_context()),
    )


def _check_target(target: Optional[str], param_hint: str) -> None:
    if target is not None and not target.strip():
        raise click.BadParameter("must not be empty", param_hint=param_hint)


@click.command(
    name="kubectl-ctx",
    short_help="Switch between Kubernetes contexts",
    epilog="""\b
Examples:
  # Show current context and select interactively
  kubectl-ctx

  # Switch to a specific context
  kubectl-ctx my-context""",
)
@click.argument("context_name", required=False)
@click.option("--kubeconfig", envvar="KUBECONFIG", default=None, help=KUBECONFIG_HELP)
@click.option("-v", "--verbose", is_flag=True, help="Print debug messages.")
@click.version_option(package_name="kubeswitch")
@click.pass_context
def kubectl_ctx(ctx: click.Context, context_name: Optional[str], kubeconfig: Optional[str], verbose: bool):
    """Switch between Kubernetes contexts.

    With no arguments, shows the current context and provides an interactive
    menu to select a new context. With a context name argument, switches
    directly to that context.

    Multiple kubeconfig files are merged (e.g. KUBECONFIG=file1:file2).
    """
    _check_target(context_name, "CONTEXT_NAME")
    options = ctx.obj or {}
    log = options.get("logger") or build_cli_logger(verbose=verbose)
    picker = options.get("picker") or ClickPicker()
    try:
        run_context_switch(log, picker, context_name, kubeconfig)
    except KubeSwitchError as err:
        log.error(f"Error: {err}")
        ctx.exit(1)


@click.command(
    name="kubectl-ns",
    short_help="Switch between Kubernetes namespaces",
    epilog="""\b
Examples:
  # Show current namespace and select interactively
  kubectl-ns

  # Switch to a specific namespace
  kubectl-ns kube-system""",
)
@click.argument("namespace", required=False)
@click.option("--kubeconfig", envvar="KUBECONFIG", default=None, help=KUBECONFIG_HELP)
@click.option("-v", "--verbose", is_flag=True, help="Print debug messages.")
@click.version_option(package_name="kubeswitch")
@click.pass_context
def kubectl_ns(ctx: click.Context, namespace: Optional[str], kubeconfig: Optional[str], verbose: bool):
    """Switch namespaces in the current Kubernetes context.

    With no arguments, shows the current namespace and provides an interactive
    menu to select a new namespace (fetched from the cluster). With a
    namespace argument, switches directly to that namespace.

    Multiple kubeconfig files are merged (e.g. KUBECONFIG=file1:file2).
    """
    _check_target(namespace, "NAMESPACE")
    options = ctx.obj or {}
    log = options.get("logger") or build_cli_logger(verbose=verbose)
    picker = options.get("picker") or ClickPicker()
    try:
        run_namespace_switch(log, picker, namespace, kubeconfig, lister=options.get("lister"))
    except KubeSwitchError as err:
        log.error(f"Error: {err}")
        ctx.exit(1)
