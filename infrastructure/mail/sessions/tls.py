"""SSL 上下文"""

import ssl


def create_ssl_context(verify_certificate: bool = True) -> ssl.SSLContext:
    """
    创建 SSL 上下文

    Args:
        verify_certificate: False 时不校验证书和主机名（自签名证书的服务器）

    Returns:
        SSLContext 实例
    """
    context = ssl.create_default_context()
    if not verify_certificate:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context
