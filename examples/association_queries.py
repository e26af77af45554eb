"""
Open Targets Association Query Examples

This file demonstrates practical usage of the opentargets_info tool for
target prioritization and disease landscaping. Each example is copy-pasteable
and runnable.

Requirements:
    - opentargets-mcp installed (pip install -e .)
    - Network access to the Open Targets Platform API

Setup:
    # Optional: point at a different Open Targets release
    export OPENTARGETS_GRAPHQL_URL="https://api.platform.opentargets.org/api/v4/graphql"

    # Run examples
    python examples/association_queries.py
"""

import asyncio
import json

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from pydantic import AnyUrl

SERVER_PARAMS = StdioServerParameters(command="opentargets-mcp")


async def call(session: ClientSession, **arguments) -> dict:
    """Call the unified tool and decode its JSON payload."""
    result = await session.call_tool("opentargets_info", arguments=arguments)
    if result.isError:
        raise RuntimeError(result.content[0].text)
    return json.loads(result.content[0].text)


# ==============================================================================
# Example 1: BRAF - From Gene Symbol to Associated Diseases
# ==============================================================================
# Use Case:
#   Resolve a gene symbol to its Ensembl ID, then list the diseases with the
#   strongest overall association evidence.
# ==============================================================================

async def example_1_braf_diseases():
    """
    Example 1: BRAF disease associations

    Expected Output:
        - BRAF resolved to ENSG00000157764
        - Melanoma and other cancers near the top of the list
    """
    print("\n" + "=" * 80)
    print("Example 1: BRAF Disease Associations")
    print("=" * 80)

    async with stdio_client(SERVER_PARAMS) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()

            search = await call(session, method="search_targets", query="BRAF", size=3)
            hits = search["data"]["search"]["hits"]
            for hit in hits:
                print(f"  {hit['id']}  {hit['name']}")

            target_id = hits[0]["id"]
            data = await call(
                session,
                method="get_target_disease_associations",
                targetId=target_id,
                minScore=0.5,
                size=150,
            )

            target = data["data"]["target"]
            rows = target["associatedDiseases"]["rows"]
            print(f"\n{target['approvedSymbol']}: {target['associatedDiseases']['count']} associated diseases")
            print(f"Scoring >= 0.5: {data['pagination']['filtered']}")
            for row in rows[:10]:
                print(f"  {row['score']:.3f}  {row['disease']['name']}")


# ==============================================================================
# Example 2: Asthma - Top Targets Summary
# ==============================================================================
# Use Case:
#   Shortlist the best-supported targets for a disease before a deeper
#   tractability review.
# ==============================================================================

async def example_2_asthma_targets():
    """
    Example 2: Asthma target shortlist

    Expected Output:
        - Up to 20 targets scoring >= 0.5 (IL13, IL4R, TSLP, ...)
    """
    print("\n" + "=" * 80)
    print("Example 2: Asthma Targets Summary")
    print("=" * 80)

    async with stdio_client(SERVER_PARAMS) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()

            data = await call(
                session,
                method="get_disease_targets_summary",
                diseaseId="MONDO_0004979",
                minScore=0.5,
                size=20,
            )

            print(f"\n{data['diseaseName']}: {data['totalTargets']} associated targets")
            print(f"Returned: {data['returnedTargets']}")
            for target in data["targets"]:
                print(f"  {target['associationScore']:.3f}  {target['targetSymbol']:<10} {target['targetName']}")


# ==============================================================================
# Example 3: Vemurafenib - Drug Resource
# ==============================================================================
# Use Case:
#   Read a drug directly by ChEMBL ID through the resource interface.
# ==============================================================================

async def example_3_drug_resource():
    """
    Example 3: Vemurafenib mechanism of action

    Expected Output:
        - BRAF inhibitor mechanism with BRAF as the target
    """
    print("\n" + "=" * 80)
    print("Example 3: Vemurafenib Drug Resource")
    print("=" * 80)

    async with stdio_client(SERVER_PARAMS) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()

            result = await session.read_resource(AnyUrl("opentargets://drug/CHEMBL1229517"))
            drug = json.loads(result.contents[0].text)["data"]["drug"]

            print(f"\n{drug['name']} ({drug['id']}), max phase {drug['maximumClinicalTrialPhase']}")
            for moa in drug["mechanismsOfAction"]["rows"]:
                symbols = ", ".join(t["approvedSymbol"] for t in moa["targets"])
                print(f"  {moa['mechanismOfAction']} -> {symbols}")


async def main():
    """Run examples interactively."""
    print("=" * 80)
    print("\nThese examples query the public Open Targets Platform API.")
    print("\nExamples:")
    print("  1. BRAF disease associations")
    print("  2. Asthma targets summary")
    print("  3. Vemurafenib drug resource")

    choice = input("\nRun which example? (1-3, or 'all'): ").strip()

    examples = {
        "1": example_1_braf_diseases,
        "2": example_2_asthma_targets,
        "3": example_3_drug_resource,
    }

    if choice.lower() == "all":
        for func in examples.values():
            await func()
    elif choice in examples:
        await examples[choice]()
    else:
        print(f"Invalid choice: {choice}")
        return

    print("\n" + "=" * 80)
    print("Examples completed!")
    print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
