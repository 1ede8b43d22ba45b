from ssh_wrap.cli import main

main(prog_name="ssh-wrap")
