from enum import Enum

from colorama import Fore, Style


class AgentColor(Enum):
    LOADER = Fore.LIGHTBLUE_EX
    FORMATTER = Fore.YELLOW
    PUBLISHER = Fore.MAGENTA
    MASTER = Fore.LIGHTGREEN_EX


def print_agent_output(output: str, agent: str = "MASTER"):
    print(f"{AgentColor[agent].value}{agent}: {output}{Style.RESET_ALL}")
