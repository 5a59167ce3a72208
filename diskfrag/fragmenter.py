from diskfrag.managers.disk import DiskManager, checksum
from diskfrag.parser import parse_disk_map

__all__ = ["checksum", "checksum_part1", "checksum_part2", "parse_disk_map"]


def checksum_part1(disk_map: str) -> int:
    # Parte 1: compacta unidade por unidade
    disk = DiskManager(parse_disk_map(disk_map))
    disk.compact_blocks()
    return disk.checksum()


def checksum_part2(disk_map: str) -> int:
    # Parte 2: move arquivos inteiros, sem fragmentá-los
    disk = DiskManager(parse_disk_map(disk_map))
    disk.compact_files()
    return disk.checksum()
