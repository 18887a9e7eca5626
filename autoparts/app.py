# autoparts/app.py
import sys

from autoparts import demo_access_control, demo_crud, demo_queries
from autoparts.database import db_init

# 명령 이름 -> 실행할 데모의 main 함수
COMMANDS = {
    "setup": db_init.main,
    "crud": demo_crud.main,
    "queries": demo_queries.main,
    "access": demo_access_control.main,
}

USAGE = f"Usage: python -m autoparts.app <{'|'.join([*COMMANDS, 'all'])}>"


def run_command(name: str) -> int:
    if name == "all":
        # 하나라도 실패하면 그 지점에서 중단합니다.
        for command in COMMANDS.values():
            status = command()
            if status != 0:
                return status
        return 0

    command = COMMANDS.get(name)
    if command is None:
        print(USAGE, file=sys.stderr)
        return 2
    return command()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2
    return run_command(args[0])

if __name__ == "__main__":
    sys.exit(main())
