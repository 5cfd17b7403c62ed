#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from workbench.artifacts import ArtifactsClient, NotebookResource, NotModified, OperationState


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create or update a notebook from an .ipynb file")
    p.add_argument("name")
    p.add_argument("path", help="Path to an .ipynb file")
    p.add_argument("--if-match", default=None, help="Only replace the notebook with this etag")
    p.add_argument("--rename-to", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    with open(args.path, encoding="utf-8") as f:
        properties = json.load(f)

    async with ArtifactsClient.from_env() as client:
        resource = NotebookResource(name=args.name, properties=properties)
        poller = await client.notebooks.create_or_update(
            args.name, resource, if_match=args.if_match
        )
        while not poller.done():
            await asyncio.sleep(poller.next_delay())
            state = await poller.poll()
            print(f"poll {poller.polls:3} : {state.value}")
        notebook = await poller.poll_until_done()
        if poller.status() is OperationState.SUCCEEDED and notebook is not None:
            print(f"Saved {notebook.name} (etag {notebook.etag})")

            again = await client.notebooks.get(args.name, if_none_match=notebook.etag)
            if isinstance(again, NotModified):
                print("Unchanged since save")

        if args.rename_to:
            rename = await client.notebooks.rename(args.name, args.rename_to)
            await rename.poll_until_done()
            print(f"Renamed {args.name} -> {args.rename_to}")


if __name__ == "__main__":
    asyncio.run(main())
