from sdk_util_generator.core.domain.artifact.generated_artifact import GeneratedArtifact

__all__ = ["GeneratedArtifact"]
