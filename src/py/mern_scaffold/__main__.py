from mern_scaffold.cli import scaffold

if __name__ == "__main__":
    scaffold(prog_name="mern-scaffold")
