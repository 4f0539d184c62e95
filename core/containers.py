"""
Container Builders.

Chainable builders producing the Container union for a task
configuration. Pass a builder (or a built Container) to
AuroraTask.container() / JobUpdate.container().

Exports:
    DockerContainerBuilder: Docker containerizer
    MesosContainerBuilder: Mesos (unified) containerizer
"""

from .models.task import (
    AppcImage,
    Container,
    DockerContainer,
    DockerImage,
    DockerParameter,
    Image,
    MesosContainer,
    Volume,
    VolumeMode,
)


class DockerContainerBuilder:
    """
    Docker containerizer.

    Example:
        DockerContainerBuilder("nginx:1.25").add_parameter("network", "host")
    """

    def __init__(self, image: str = ""):
        self._image = image
        self._parameters = []

    def image(self, image: str) -> "DockerContainerBuilder":
        self._image = image
        return self

    def add_parameter(self, name: str, value: str) -> "DockerContainerBuilder":
        self._parameters.append(DockerParameter(name=name, value=value))
        return self

    def build(self) -> Container:
        return Container(docker=DockerContainer(
            image=self._image,
            parameters=[p.model_copy() for p in self._parameters],
        ))


class MesosContainerBuilder:
    """
    Mesos containerizer. Without an image the task runs on the host filesystem.

    Example:
        MesosContainerBuilder().docker_image("python", "3.12").add_volume("/data", "/mnt/data")
    """

    def __init__(self):
        self._image = None
        self._volumes = []

    def docker_image(self, name: str, tag: str) -> "MesosContainerBuilder":
        self._image = Image(docker=DockerImage(name=name, tag=tag))
        return self

    def appc_image(self, name: str, image_id: str) -> "MesosContainerBuilder":
        self._image = Image(appc=AppcImage(name=name, image_id=image_id))
        return self

    def add_volume(self, container_path: str, host_path: str,
                   mode: VolumeMode = VolumeMode.RO) -> "MesosContainerBuilder":
        self._volumes.append(Volume(container_path=container_path, host_path=host_path, mode=mode))
        return self

    def build(self) -> Container:
        return Container(mesos=MesosContainer(
            image=self._image.model_copy(deep=True) if self._image else None,
            volumes=[v.model_copy() for v in self._volumes],
        ))
