from bangscript.main import main


main()
