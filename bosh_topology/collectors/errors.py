"""Exceptions raised while collecting deployment topology."""


class CollectionError(Exception):
    """Base class for errors that abort a collection cycle."""


class DeploymentsListingError(CollectionError):
    """The director could not list the deployments to collect."""


class FacetFetchError(CollectionError):
    """Reading one facet of one deployment failed."""

    def __init__(self, deployment: str, facet: str, cause: BaseException):
        """
        Args:
            deployment: Deployment name
            facet: Facet being read (Errands, Instances, Releases, Stemcells)
            cause: Underlying director error
        """
        self.deployment = deployment
        self.facet = facet
        self.cause = cause
        super().__init__(
            f"Error while reading {facet} for deployment `{deployment}`: {cause}"
        )
