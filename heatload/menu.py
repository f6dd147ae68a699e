"""Interactive menus of the heat load console.

`HeatLoadApp` is a finite-state controller: its state is the menu that is
currently active. Each step shows the options of that menu, reads the choice
of the user, carries out the selected operation and returns the menu that
becomes active next.
"""
from enum import Enum, auto

from .config import SETTINGS
from .console import Console
from .exceptions import FileWriteError
from .loads import LoadItem, LoadMethod, BUILDERS
from .logging import ModuleLogger
from .report import print_item_table, export_csv
from .units import btuhr_to_kw, btuhr_to_ton, kw_to_btuhr, ton_to_btuhr

logger = ModuleLogger.get_logger(__name__)

MAX_POWER = 1e18

BANNER = (
    "=============================================\n"
    " HEAT LOAD CALCULATOR (Console) - Imperial\n"
    " Methods: Air Sensible | Hydronic | Conduction | ACH\n"
    "---------------------------------------------\n"
    " Notes:\n"
    "  - Quick-calcs intended for preliminary sizing.\n"
    "  - Verify assumptions, code requirements, and design standards.\n"
    "=============================================\n\n"
)

# menu options in the order they are numbered on screen
LOAD_METHODS = [
    LoadMethod.AIR_SENSIBLE,
    LoadMethod.HYDRONIC,
    LoadMethod.CONDUCTION,
    LoadMethod.ACH
]

LOAD_LABELS = [
    "Air Sensible (CFM, dT)",
    "Hydronic (GPM, dT)",
    "Conduction (U/R, A, dT)",
    "ACH Air Load (Vol, ACH, dT)"
]


class Menu(Enum):
    MAIN = auto()
    QUICK_CALCS = auto()
    PROJECT = auto()
    CONVERSIONS = auto()
    EXIT = auto()


def _menu_text(title: str, options: list[str], back: str = "Back") -> str:
    rule = "============================="
    lines = [f"\n{rule}", f" {title}", rule]
    lines.extend(f"{i}) {option}" for i, option in enumerate(options, start=1))
    lines.append(f"0) {back}")
    return '\n'.join(lines) + '\n'


class HeatLoadApp:
    """
    Runs the menus of the heat load console on a `Console`.

    Attributes
    ----------
    console:
        Console used for all prompts and output.
    items:
        The load items of the project, in the order they were added. The list
        lives as long as the application object.
    state:
        The currently active menu.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.items: list[LoadItem] = []
        self.state = Menu.MAIN
        self._handlers = {
            Menu.MAIN: self.main_menu,
            Menu.QUICK_CALCS: self.quick_calc_menu,
            Menu.PROJECT: self.project_menu,
            Menu.CONVERSIONS: self.conversions_menu
        }

    def run(self) -> int:
        """Shows the banner and runs the menus until the user exits. Returns
        the exit status of the program.
        """
        self.console.write(BANNER)
        while self.state is not Menu.EXIT:
            self.state = self.step()
        return 0

    def step(self) -> Menu:
        """Runs one iteration of the active menu and returns the next one."""
        return self._handlers[self.state]()

    def main_menu(self) -> Menu:
        self.console.write(_menu_text(
            "MAIN MENU",
            ["Quick Calcs", "Project Mode (Add + Sum)", "Conversions"],
            back="Exit"
        ))
        choice = self.console.read_int("Select: ", 0, 3)
        if choice == 0:
            self.console.write("\nGoodbye.\n")
            return Menu.EXIT
        return [Menu.QUICK_CALCS, Menu.PROJECT, Menu.CONVERSIONS][choice - 1]

    def quick_calc_menu(self) -> Menu:
        self.console.write(_menu_text("QUICK CALCS", LOAD_LABELS))
        choice = self.console.read_int("Select: ", 0, len(LOAD_METHODS))
        if choice == 0:
            return Menu.MAIN
        item = BUILDERS[LOAD_METHODS[choice - 1]](self.console)
        self.console.write(
            "\n--- Output (Quick) ---\n"
            f"BTU/hr: {item.btu_per_hr:.1f}\n"
            f"kW:     {btuhr_to_kw(item.btu_per_hr):.3f}\n"
            f"Tons:   {btuhr_to_ton(item.btu_per_hr):.3f}\n"
        )
        self.console.pause()
        return Menu.QUICK_CALCS

    def project_menu(self) -> Menu:
        self.console.write(_menu_text(
            "PROJECT MODE (Build & Sum)",
            [f"Add {label}" for label in LOAD_LABELS] + [
                "View Summary",
                "Remove Item",
                "Export CSV",
                "Clear Project"
            ]
        ))
        choice = self.console.read_int("Select: ", 0, 8)
        if choice == 0:
            return Menu.MAIN
        try:
            if choice <= len(LOAD_METHODS):
                self.add_item(LOAD_METHODS[choice - 1])
            elif choice == 5:
                self.view_summary()
            elif choice == 6:
                self.remove_item()
            elif choice == 7:
                self.export()
            elif choice == 8:
                self.clear()
        except EOFError:
            # end of input ends the session, also in the middle of an operation
            raise
        except Exception:
            logger.exception(f"project operation {choice} failed")
            self.console.write("  [Error] Unexpected issue. Inputs were not applied.\n")
            self.console.pause()
        return Menu.PROJECT

    def add_item(self, method: LoadMethod) -> LoadItem:
        item = BUILDERS[method](self.console)
        self.items.append(item)
        logger.info(f"added item {len(self.items)}: {item.name} ({item.method})")
        return item

    def view_summary(self) -> None:
        if not self.items:
            self.console.write("\n(No items yet.)\n")
        else:
            print_item_table(self.items, self.console)
        self.console.pause()

    def remove_item(self) -> None:
        if not self.items:
            self.console.write("\n(No items to remove.)\n")
            self.console.pause()
            return
        print_item_table(self.items, self.console)
        idx = self.console.read_int("Remove which item #? ", 1, len(self.items))
        item = self.items.pop(idx - 1)
        logger.info(f"removed item {idx}: {item.name}")
        self.console.write("Removed.\n")
        self.console.pause()

    def export(self) -> None:
        if not self.items:
            self.console.write("\n(No items to export.)\n")
            self.console.pause()
            return
        path = self.console.read_line("CSV file path (e.g., heat_load.csv): ")
        if not path:
            path = SETTINGS.default_export_path
        try:
            export_csv(self.items, path)
        except FileWriteError as err:
            logger.info(f"export failed: {err.__cause__}")
            self.console.write(f"  ***Error*** Could not write file: {path}\n")
        else:
            self.console.write(f"  Saved: {path}\n")
        self.console.pause()

    def clear(self) -> None:
        if self.console.read_yes_no("Clear all items?"):
            self.items.clear()
            logger.info("project cleared")
            self.console.write("Cleared.\n")
        self.console.pause()

    def conversions_menu(self) -> Menu:
        self.console.write(_menu_text(
            "CONVERSIONS",
            ["BTU/hr -> kW & Tons", "kW -> BTU/hr", "Tons -> BTU/hr"]
        ))
        choice = self.console.read_int("Select: ", 0, 3)
        if choice == 0:
            return Menu.MAIN
        if choice == 1:
            btu = self.console.read_float("BTU/hr: ", -MAX_POWER, MAX_POWER)
            self.console.write(
                f"kW   = {btuhr_to_kw(btu):.3f}\n"
                f"Tons = {btuhr_to_ton(btu):.3f}\n"
            )
        elif choice == 2:
            kw = self.console.read_float("kW: ", -MAX_POWER, MAX_POWER)
            self.console.write(f"BTU/hr = {kw_to_btuhr(kw):.1f}\n")
        else:
            ton = self.console.read_float("Tons: ", -MAX_POWER, MAX_POWER)
            self.console.write(f"BTU/hr = {ton_to_btuhr(ton):.1f}\n")
        self.console.pause()
        return Menu.CONVERSIONS
