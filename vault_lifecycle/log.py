from colorama import Fore, Style

CONSOLE_SEPARATOR = "--------------------------------------------------------------------------"


def h1(msg):
    print(f"\n\n{Fore.CYAN}{CONSOLE_SEPARATOR}")
    print(f"{Fore.CYAN}{msg}{Style.RESET_ALL}\n")


def h2(msg):
    print(f"\n{Fore.LIGHTBLUE_EX}▸ {msg}{Style.RESET_ALL}\n")


def h3(msg):
    print(f"\t{Fore.GREEN}{msg}{Style.RESET_ALL}")


def value(label, amount):
    print(f"\t{label}: {Fore.YELLOW}{amount}{Style.RESET_ALL}")


def error(msg):
    print(f"{Fore.RED}{msg}{Style.RESET_ALL}")


def info(msg):
    print(msg)
