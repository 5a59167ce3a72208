from dataclasses import dataclass

# Valor que marca uma unidade livre no disco
FREE = -1


class SimulationError(Exception):
    pass


class DiskError(Exception):
    pass


# Erros personalizados para falhas na leitura e manipulação do disco
class InvalidInputError(DiskError):
    pass


class FileNotExistError(DiskError):
    pass


@dataclass
class Segment:
    id: int
    size: int
