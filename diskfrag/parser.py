from diskfrag.types import FREE, InvalidInputError, Segment

DIGITS = "0123456789"


def parse_disk_map(disk_map: str) -> list[Segment]:
    """Converte o mapa denso em segmentos alternados de arquivo e espaço livre."""
    segments: list[Segment] = []
    for index, char in enumerate(disk_map):
        # str.isdigit aceita dígitos unicode, por isso a comparação explícita
        if char not in DIGITS:
            raise InvalidInputError(
                f"Caractere inválido {char!r} na posição {index}, o mapa deve conter somente dígitos."
            )

        # Posições pares são arquivos, ímpares são espaço livre
        file_id = index // 2 if index % 2 == 0 else FREE
        segments.append(Segment(id=file_id, size=int(char)))

    return segments


def expand(segments: list[Segment]) -> list[int]:
    # Uma entrada por unidade do disco
    blocks: list[int] = []
    for segment in segments:
        blocks.extend([segment.id] * segment.size)

    return blocks
