import argparse
import sys


from diskfrag.managers.disk import DiskManager
from diskfrag.parser import parse_disk_map
from diskfrag.types import DiskError


def run_part(part: int, disk_map: str, show_map: bool, verbose: bool) -> int:
    disk = DiskManager(parse_disk_map(disk_map), verbose=verbose)
    if part == 1:
        moved = disk.compact_blocks()
        print(f"Unidades movidas: {moved}")
    else:
        moved = disk.compact_files()
        print(f"Arquivos movidos: {moved}")

    if show_map:
        print(f"Mapa do disco: {disk.render()}")

    answer = disk.checksum()
    print("==========================================")
    print(f"Parte {part}: {answer}")
    print("==========================================")
    return answer


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("input_file", help="Arquivo com o mapa do disco")
    parser.add_argument("--part", type=int, choices=[1, 2], help="Roda somente uma das partes")
    parser.add_argument(
        "--show-map",
        action="store_true",
        help="Mostra o disco após a compactação (unidades separadas por espaço se algum id tiver mais de um dígito)",
    )
    parser.add_argument("--verbose", action="store_true", help="Mostra cada arquivo movido")
    args = parser.parse_args(argv)

    # Lê o mapa do disco, ignorando espaços e quebras de linha nas pontas
    with open(args.input_file) as f:
        disk_map = f.read().strip()

    parts = [args.part] if args.part is not None else [1, 2]
    try:
        for part in parts:
            run_part(part, disk_map, args.show_map, args.verbose)
    except DiskError as e:
        print(f"Não pode processar o mapa do disco: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
