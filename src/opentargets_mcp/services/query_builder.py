"""
GraphQL query builder for the Open Targets Platform API.

Pure mapping from (method, validated arguments) to query text plus variable
bindings. The paginated association templates always bind $index and $size
so the aggregator can walk pages by varying those two variables.
"""

from dataclasses import dataclass, field
from typing import Any

from opentargets_mcp.constants import (
    ASSOCIATION_PAGE_SIZE,
    DETAILS_ASSOCIATION_SIZE,
    MAX_SEARCH_PAGE_SIZE,
    Method,
)
from opentargets_mcp.schemas import (
    AssociationQuery,
    DiseaseTargetsSummaryQuery,
    EntityDetailsQuery,
    SearchQuery,
)


@dataclass(frozen=True)
class GraphQLRequest:
    """Query text and variables for one upstream call."""

    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


# ============================================================================
# Search
# ============================================================================

SEARCH_QUERY = """
query Search($queryString: String!, $entityNames: [String!], $size: Int!) {
  search(queryString: $queryString, entityNames: $entityNames, page: {index: 0, size: $size}) {
    total
    hits {
      id
      name
      description
      entity
    }
  }
}
"""

# ============================================================================
# Associations (paginated)
# ============================================================================

TARGET_ASSOCIATIONS_QUERY = """
query GetTargetAssociations($ensemblId: String!, $index: Int!, $size: Int!) {
  target(ensemblId: $ensemblId) {
    id
    approvedSymbol
    associatedDiseases(page: {index: $index, size: $size}) {
      count
      rows {
        disease {
          id
          name
        }
        score
      }
    }
  }
}
"""

DISEASE_ASSOCIATIONS_QUERY = """
query GetDiseaseAssociations($efoId: String!, $index: Int!, $size: Int!) {
  disease(efoId: $efoId) {
    id
    name
    associatedTargets(page: {index: $index, size: $size}) {
      count
      rows {
        target {
          id
          approvedSymbol
          approvedName
        }
        score
      }
    }
  }
}
"""

# ============================================================================
# Details
# ============================================================================

TARGET_DETAILS_QUERY = """
query GetTarget($ensemblId: String!, $associationSize: Int!) {
  target(ensemblId: $ensemblId) {
    id
    approvedSymbol
    approvedName
    biotype
    functionDescriptions
    nameSynonyms {
      label
      source
    }
    symbolSynonyms {
      label
      source
    }
    genomicLocation {
      chromosome
      start
      end
      strand
    }
    canonicalTranscript {
      id
      start
      end
    }
    transcriptIds
    proteinIds {
      id
      source
    }
    dbXrefs {
      id
      source
    }
    geneOntology {
      term {
        id
        name
      }
      aspect
      evidence
      source
    }
    pathways {
      pathway
      pathwayId
      topLevelTerm
    }
    subcellularLocations {
      location
      source
      termSL
    }
    tractability {
      label
      modality
      value
    }
    targetClass {
      id
      label
      level
    }
    geneticConstraint {
      constraintType
      exp
      obs
      score
      oe
      oeLower
      oeUpper
    }
    depMapEssentiality {
      tissue {
        id
        name
      }
    }
    tep {
      name
      therapeuticArea
      uri
      description
    }
    knownDrugs(size: 100) {
      uniqueDrugs
      uniqueTargets
      uniqueDiseases
      count
      rows {
        approvedSymbol
        approvedName
        prefName
        drugType
        drugId
        mechanismOfAction
        targetClass
        diseaseId
        disease {
          id
          name
        }
        phase
        status
        urls {
          name
          url
        }
        references {
          ids
          source
          urls
        }
      }
    }
    associatedDiseases(page: {index: 0, size: $associationSize}) {

      count
      rows {
        disease {
          id
          name
        }
        score
        datatypeScores {
          id
          score
        }
      }
    }
  }
}
"""

DISEASE_DETAILS_QUERY = """
query GetDisease($efoId: String!) {
  disease(efoId: $efoId) {
    id
    name
    description
    synonyms {
      relation
      terms
    }
    therapeuticAreas {
      id
      name
    }
    parents {
      id
      name
    }
    children {
      id
      name
    }
    dbXRefs
  }
}
"""

# ============================================================================
# Resource reads
# ============================================================================

DRUG_QUERY = """
query GetDrug($chemblId: String!) {
  drug(chemblId: $chemblId) {
    id
    name
    description
    drugType
    synonyms
    tradeNames
    maximumClinicalTrialPhase
    isApproved
    hasBeenWithdrawn
    mechanismsOfAction {
      rows {
        mechanismOfAction
        actionType
        targets {
          id
          approvedSymbol
        }
      }
    }
  }
}
"""

ASSOCIATION_PAIR_QUERY = """
query GetAssociationPair($efoId: String!, $ensemblId: String!) {
  disease(efoId: $efoId) {
    id
    name
    associatedTargets(Bs: [$ensemblId]) {
      count
      rows {
        target {
          id
          approvedSymbol
          approvedName
        }
        score
        datatypeScores {
          id
          score
        }
      }
    }
  }
}
"""

RESOURCE_SEARCH_ENTITIES = ["target", "disease", "drug"]
RESOURCE_SEARCH_SIZE = 25


# ============================================================================
# Builders
# ============================================================================


def build_search_query(entity: str, params: SearchQuery) -> GraphQLRequest:
    """Search a single entity type ('target' or 'disease').

    The upstream page is bounded; larger requests are served from one page.
    """
    return GraphQLRequest(
        SEARCH_QUERY,
        {
            "queryString": params.query,
            "entityNames": [entity],
            "size": min(params.size, MAX_SEARCH_PAGE_SIZE),
        },
    )


def build_target_associations_query(
    ensembl_id: str,
    page_index: int,
    page_size: int = ASSOCIATION_PAGE_SIZE,
) -> GraphQLRequest:
    """One page of diseases associated with a target."""
    return GraphQLRequest(
        TARGET_ASSOCIATIONS_QUERY,
        {"ensemblId": ensembl_id, "index": page_index, "size": page_size},
    )


def build_disease_associations_query(
    efo_id: str,
    page_index: int,
    page_size: int = ASSOCIATION_PAGE_SIZE,
) -> GraphQLRequest:
    """One page of targets associated with a disease."""
    return GraphQLRequest(
        DISEASE_ASSOCIATIONS_QUERY,
        {"efoId": efo_id, "index": page_index, "size": page_size},
    )


def build_target_details_query(ensembl_id: str) -> GraphQLRequest:
    return GraphQLRequest(
        TARGET_DETAILS_QUERY,
        {"ensemblId": ensembl_id, "associationSize": DETAILS_ASSOCIATION_SIZE},
    )


def build_disease_details_query(efo_id: str) -> GraphQLRequest:
    return GraphQLRequest(DISEASE_DETAILS_QUERY, {"efoId": efo_id})


def build_drug_query(chembl_id: str) -> GraphQLRequest:
    return GraphQLRequest(DRUG_QUERY, {"chemblId": chembl_id})


def build_association_pair_query(target_id: str, disease_id: str) -> GraphQLRequest:
    return GraphQLRequest(
        ASSOCIATION_PAIR_QUERY,
        {"efoId": disease_id, "ensemblId": target_id},
    )


def build_resource_search_query(query: str) -> GraphQLRequest:
    """Search across targets, diseases, and drugs."""
    return GraphQLRequest(
        SEARCH_QUERY,
        {
            "queryString": query,
            "entityNames": RESOURCE_SEARCH_ENTITIES,
            "size": RESOURCE_SEARCH_SIZE,
        },
    )


def build_query(
    method: Method,
    params: Any,
    page_index: int = 0,
    page_size: int = ASSOCIATION_PAGE_SIZE,
) -> GraphQLRequest:
    """
    Build the upstream request for a method.

    Args:
        method: Operation being served
        params: Validated argument model for the method
        page_index: Page to request (paginated methods only)
        page_size: Page size to request (paginated methods only)

    Returns:
        GraphQLRequest ready to send

    Raises:
        ValueError: If method and params do not belong together
    """
    if method == Method.SEARCH_TARGETS and isinstance(params, SearchQuery):
        return build_search_query("target", params)

    elif method == Method.SEARCH_DISEASES and isinstance(params, SearchQuery):
        return build_search_query("disease", params)

    elif method == Method.GET_TARGET_DISEASE_ASSOCIATIONS and isinstance(
        params, AssociationQuery
    ):
        if params.target_id and not params.disease_id:
            return build_target_associations_query(params.target_id, page_index, page_size)
        if params.disease_id and not params.target_id:
            return build_disease_associations_query(params.disease_id, page_index, page_size)
        raise ValueError("Pair association lookup has no paginated query")

    elif method == Method.GET_DISEASE_TARGETS_SUMMARY and isinstance(
        params, DiseaseTargetsSummaryQuery
    ):
        return build_disease_associations_query(params.disease_id, page_index, page_size)

    elif method == Method.GET_TARGET_DETAILS and isinstance(params, EntityDetailsQuery):
        return build_target_details_query(params.id)

    elif method == Method.GET_DISEASE_DETAILS and isinstance(params, EntityDetailsQuery):
        return build_disease_details_query(params.id)

    raise ValueError(f"No query template for {method} with {type(params).__name__}")
