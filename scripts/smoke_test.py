from __future__ import annotations

import asyncio
import json
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from linear_mcp.core.adapter import LinearAdapter
from linear_mcp.core.config import (
    MissingTokenError,
    create_client_from_env,
    load_env_config,
)
from linear_mcp.core.dispatcher import Dispatcher
from linear_mcp.core.errors import AuthenticationError


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val else default


def _print_step(title: str) -> None:
    print(f"\n== {title}")


def _fail(msg: str) -> int:
    print(f"FAILED: {msg}")
    return 1


async def _call(
    dispatcher: Dispatcher, name: str, arguments: Dict[str, Any]
) -> Dict[str, Any]:
    result = await dispatcher.invoke(name, arguments)
    if not result.ok:
        raise RuntimeError(f"{result.error.kind}: {result.error.message}")
    return json.loads(result.text or "{}")


async def run_smoke_test() -> int:
    # --- Config ---
    try:
        config = load_env_config()
    except MissingTokenError as exc:
        return _fail(str(exc))

    cfg_team_id = _env("TEST_TEAM_ID")
    create = _env("SMOKE_TEST_CREATE", "0") == "1"

    print("Config:")
    print(f"  api_url: {config.api_url}")
    print(f"  team_id: {cfg_team_id}")
    print(f"  create: {create}")

    client = create_client_from_env(config)
    adapter = LinearAdapter(client)

    async with client:
        _print_step("Authenticate")
        try:
            viewer = await adapter.authenticate()
        except AuthenticationError as exc:
            return _fail(exc.message)
        print(f"Viewer: {viewer.get('name')} (id={viewer.get('id')})")

        dispatcher = Dispatcher(adapter)

        try:
            # --- Teams ---
            _print_step("List teams")
            teams = (await _call(dispatcher, "linear_get_teams", {}))["teams"]
            nodes = teams.get("nodes", [])
            if not nodes:
                return _fail("No teams available.")
            team = next((t for t in nodes if t.get("id") == cfg_team_id), nodes[0])
            team_id = team["id"]
            print(f"Selected team: {team.get('name')} (id={team_id})")

            # --- Issues / cycles / projects ---
            _print_step("Search issues")
            issues = await _call(
                dispatcher,
                "linear_search_issues",
                {"teamIds": [team_id], "first": 5},
            )
            print(f"Issues returned: {len(issues['issues'].get('nodes', []))}")

            _print_step("List cycles")
            cycles = await _call(dispatcher, "linear_get_cycles", {"teamId": team_id})
            print(f"Cycles returned: {len(cycles['cycles'].get('nodes', []))}")

            _print_step("List projects")
            projects = await _call(
                dispatcher, "linear_get_projects", {"teamId": team_id, "first": 5}
            )
            print(f"Projects returned: {len(projects['projects'].get('nodes', []))}")

            # --- Create / update (optional) ---
            _print_step("Create and update issue")
            if not create:
                print("Skipped (SMOKE_TEST_CREATE=0).")
            else:
                stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
                created = await _call(
                    dispatcher,
                    "linear_create_issue",
                    {
                        "teamId": team_id,
                        "title": f"Smoke Test {stamp}",
                        "description": "Automated smoke test artifact.",
                    },
                )
                issue = created["issuePayload"].get("issue") or {}
                if not issue.get("id"):
                    return _fail("Create did not return an issue id.")
                print(f"Created issue {issue.get('identifier')} (id={issue['id']})")

                updated = await _call(
                    dispatcher,
                    "linear_update_issue",
                    {"issueId": issue["id"], "title": f"Smoke Test {stamp} (updated)"},
                )
                if not updated["issuePayload"].get("success"):
                    return _fail("Update was not reported as successful.")
                print("Updated issue title. Issue left in place.")
        except RuntimeError as exc:
            return _fail(str(exc))

    print("\nPASSED smoke test.")
    return 0


def main() -> None:
    exit_code = asyncio.run(run_smoke_test())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
