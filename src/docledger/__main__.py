from __future__ import annotations

import argparse
import logging
import time

from .runtime.config import load_settings
from .runtime.server import run


def main() -> None:
    settings = load_settings()
    p = argparse.ArgumentParser(prog="docledger", description="docledger: document hash registry node")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--admin", default=settings.admin, help="deployer / administrator identity")
    p.add_argument("--log-level", default=settings.log_level)
    args = p.parse_args()

    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    srv = run(host=args.host, port=args.port, admin=args.admin, log_level=args.log_level)
    print(getattr(srv, "url", None) or srv.base_url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
