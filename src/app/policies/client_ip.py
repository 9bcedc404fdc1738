"""Resolução do IP do cliente atrás de proxies reversos."""

from __future__ import annotations

UNKNOWN_CLIENT = "unknown"


def resolve_client_ip(
    forwarded_for: str | None,
    peer_ip: str | None,
    trusted_hops: int,
) -> str:
    """Retorna o IP a usar como chave de rate limit.

    Com `trusted_hops` proxies confiáveis, o IP real é a entrada de
    X-Forwarded-For adicionada pelo proxy mais externo confiável, contando
    da direita. Entradas à esquerda disso são controladas pelo cliente.

    Args:
        forwarded_for: Header X-Forwarded-For bruto.
        peer_ip: IP do socket (request.client.host).
        trusted_hops: Quantidade de proxies confiáveis (0 = ignorar header).
    """
    peer = peer_ip or UNKNOWN_CLIENT
    if trusted_hops <= 0 or not forwarded_for:
        return peer

    hops = [part.strip() for part in forwarded_for.split(",") if part.strip()]
    if not hops:
        return peer
    # A cadeia completa é XFF + peer; o peer é o proxy mais próximo
    chain = [*hops, peer]
    index = max(len(chain) - 1 - trusted_hops, 0)
    return chain[index]
