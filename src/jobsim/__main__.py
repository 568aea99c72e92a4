from jobsim.cli import main

main()
