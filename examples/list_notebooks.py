#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from workbench.artifacts import ArtifactsClient, ClientConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List notebooks in a workspace")
    p.add_argument("endpoint", nargs="?", help="Workspace endpoint (default: $WORKBENCH_ENDPOINT)")
    p.add_argument("--token", help="Bearer token sent as Authorization")
    p.add_argument("--summary", action="store_true", help="Use the summarized listing")
    p.add_argument("--pages", action="store_true", help="Print one line per page")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    headers = {"Authorization": f"Bearer {args.token}"} if args.token else None
    config = ClientConfig.from_env() if args.endpoint is None else ClientConfig(endpoint=args.endpoint)

    async with ArtifactsClient(config=config, default_headers=headers) as client:
        pager = client.notebooks.list_summary() if args.summary else client.notebooks.list()
        print("=" * 65)
        if args.pages:
            async for page in pager.by_page():
                print(f"Page {pager.pages_fetched:3} : {len(page.value)} notebooks")
                print(f"  next     : {page.continuation_token or '-'}")
        else:
            print(f"{'Name':40} | {'ETag':20}")
            print("-" * 65)
            async for notebook in pager:
                print(f"{notebook.name or '':40} | {notebook.etag or '':20}")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
