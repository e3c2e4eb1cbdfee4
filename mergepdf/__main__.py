from mergepdf.cli import main

main(prog_name="mergepdf")
