from dataclasses import dataclass
from typing import Optional

from diskfrag.parser import expand
from diskfrag.types import FREE, FileNotExistError, Segment, SimulationError


@dataclass
class Metadata:
    file_id: int
    address: int
    size: int


def checksum(blocks: list[int]) -> int:
    # Unidades livres não contribuem
    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id != FREE)


class DiskManager:
    def __init__(self, segments: list[Segment], verbose: bool = False):
        # Inicializa as unidades do disco a partir dos segmentos
        self.blocks: list[int] = expand(segments)
        self.metadata: dict[int, Metadata] = {}
        self.verbose = verbose

        # Arquivos de tamanho zero não ocupam unidades e ficam fora da tabela
        address = 0
        for segment in segments:
            if segment.id != FREE and segment.size > 0:
                file = Metadata(file_id=segment.id, address=address, size=segment.size)
                self.metadata[segment.id] = file
            address += segment.size

        # Primeira unidade livre, só avança durante a compactação por arquivo
        self.first_free = 0
        self.advance_first_free()

    def advance_first_free(self):
        while self.first_free < len(self.blocks) and self.blocks[self.first_free] != FREE:
            self.first_free += 1

    def compact_blocks(self) -> int:
        """Move uma unidade por vez do fim do disco para o primeiro espaço livre.

        Equivale a repetir "unidade ocupada mais à direita vai para a unidade
        livre mais à esquerda" até que nada mude, mas com dois cursores que só
        andam em uma direção. Retorna o número de unidades movidas.
        """
        left = 0
        right = len(self.blocks) - 1
        moved = 0

        while True:
            while left < len(self.blocks) and self.blocks[left] != FREE:
                left += 1
            while right >= 0 and self.blocks[right] == FREE:
                right -= 1

            # Nenhum espaço livre antes da última unidade ocupada
            if left >= right:
                break

            self.blocks[left] = self.blocks[right]
            self.blocks[right] = FREE
            moved += 1

        # Arquivos podem ter sido partidos, os intervalos não valem mais
        if moved > 0:
            self.metadata.clear()
        self.first_free = left

        return moved

    def first_fit(self, size: int, end: int) -> Optional[int]:
        # Busca o primeiro espaço contíguo livre entre [first_free, end)
        count = 0
        for i in range(self.first_free, end):
            if self.blocks[i] == FREE:
                count += 1
                if count == size:
                    return i - size + 1
            else:
                count = 0

        return None

    def move_file(self, file_id: int) -> bool:
        file = self.metadata.get(file_id)
        if file is None:
            raise FileNotExistError(f"Arquivo {file_id} não existe no disco.")

        address = self.first_fit(file.size, file.address)
        if address is None:
            return False

        if any(self.blocks[i] != file_id for i in range(file.address, file.address + file.size)):
            raise SimulationError(f"Blocos do arquivo {file_id} não batem com seus metadados.")

        # Libera os blocos antigos e ocupa o início do espaço encontrado
        for i in range(file.address, file.address + file.size):
            self.blocks[i] = FREE
        for i in range(address, address + file.size):
            self.blocks[i] = file_id

        if self.verbose:
            print(f"Arquivo {file_id} movido do endereço {file.address} para {address}.")

        file.address = address
        self.advance_first_free()
        return True

    def compact_files(self) -> int:
        # Cada arquivo é considerado uma única vez, do maior id para o menor
        moved = 0
        for file_id in sorted(self.metadata, reverse=True):
            if self.move_file(file_id):
                moved += 1

        return moved

    def checksum(self) -> int:
        return checksum(self.blocks)

    def render(self) -> str:
        units = ["." if file_id == FREE else str(file_id) for file_id in self.blocks]
        # Com ids de mais de um dígito, separa as unidades para o mapa não ficar ambíguo
        if any(file_id >= 10 for file_id in self.blocks):
            return " ".join(units)
        return "".join(units)
