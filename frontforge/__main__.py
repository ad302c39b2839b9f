from frontforge.cli import frontforge_group

if __name__ == "__main__":
    frontforge_group()
